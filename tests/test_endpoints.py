"""Typed decoding of real exchange payloads for every endpoint group."""
from datetime import datetime, timezone
from decimal import Decimal

import msgspec
import orjson
import pytest

from ftx_rest.endpoints import (
    CancelOrder,
    ChangeSubaccountName,
    CreateSubaccount,
    GetAccountInformation,
    GetAllBalances,
    GetBalances,
    GetBorrowHistory,
    GetBorrowMarketInfo,
    GetBorrowRates,
    GetCandles,
    GetCoins,
    GetDailyBorrowedAmounts,
    GetExpiredFutures,
    GetFills,
    GetFundingPayments,
    GetFundingRates,
    GetFuture,
    GetFutureStats,
    GetIndexCandles,
    GetIndexConstituents,
    GetIndexWeights,
    GetLatencyStatistics,
    GetMarket,
    GetMarkets,
    GetOpenOrders,
    GetOrderBook,
    GetOrderStatus,
    GetPositions,
    GetSubaccountBalances,
    GetSubaccounts,
    GetTrades,
    PlaceOrder,
    TransferBetweenSubaccounts,
)
from ftx_rest.endpoints.futures import Future, FundingRate, FutureGroup, FutureType
from ftx_rest.endpoints.markets import MarketType
from ftx_rest.endpoints.orders import Order
from ftx_rest.response import Response
from ftx_rest.types import OrderStatus, OrderType, Side


def envelope(result) -> bytes:
    return orjson.dumps({"success": True, "result": result})


def decode(request_cls, result):
    return Response(200, envelope(result), request_cls.RESPONSE).deserialize()


MARKET = {
    "name": "BTC-PERP", "baseCurrency": None, "quoteCurrency": None,
    "quoteVolume24h": 28914.76, "change1h": 0.012, "change24h": 0.0299,
    "changeBod": 0.0156, "highLeverageFeeExempt": False, "minProvideSize": 0.001,
    "type": "future", "underlying": "BTC", "enabled": True, "ask": 3949.25,
    "bid": 3949, "last": 10579.52, "postOnly": False, "price": 10579.52,
    "priceIncrement": 0.25, "sizeIncrement": 0.0001, "restricted": False,
    "volumeUsd24h": 28914.76, "largeOrderThreshold": 5000.0, "isEtfMarket": False,
}

FUTURE = {
    "name": "BTC-MOVE-0402", "underlying": "BTC",
    "description": "Bitcoin MOVE 2022-04-02 Contracts", "type": "move",
    "expiry": "2022-04-03T00:00:00+00:00", "perpetual": False, "expired": False,
    "enabled": True, "postOnly": False, "priceIncrement": 1, "sizeIncrement": 0.0001,
    "last": 299, "bid": 294, "ask": 304, "index": 46088.731248179, "mark": 299,
    "imfFactor": 0.002, "lowerBound": 1, "upperBound": 4881,
    "underlyingDescription": "Bitcoin", "expiryDescription": "Today",
    "moveStart": "2022-04-02T00:00:00+00:00", "marginPrice": 46088.731248179,
    "positionLimitWeight": 2, "group": "daily", "change1h": 0.31140350877192985,
    "change24h": -0.6210392902408112, "changeBod": -0.6238993710691824,
    "volumeUsd24h": 361892.0658, "volume": 566.0078, "openInterest": 507.2044,
    "openInterestUsd": 151654.1156,
}

ORDER = {
    "createdAt": "2019-03-05T09:56:55.728933+00:00", "filledSize": 10,
    "future": "XRP-PERP", "id": 9596912, "market": "XRP-PERP", "price": 0.306525,
    "avgFillPrice": 0.306526, "remainingSize": 31421, "side": "sell", "size": 31431,
    "status": "open", "type": "limit", "reduceOnly": False, "ioc": False,
    "postOnly": False, "liquidation": False, "clientId": "your_client_order_id",
}

POSITION = {
    "collateralUsed": 0, "cost": 0, "cumulativeBuySize": None,
    "cumulativeSellSize": None, "entryPrice": None, "estimatedLiquidationPrice": None,
    "future": "VET-PERP", "initialMarginRequirement": 0.33333333, "longOrderSize": 0,
    "maintenanceMarginRequirement": 0.03, "netSize": 0, "openSize": 0,
    "realizedPnl": -5.2667467, "recentAverageOpenPrice": None,
    "recentBreakEvenPrice": None, "recentPnl": None, "shortOrderSize": 0,
    "side": "buy", "size": 0, "unrealizedPnl": 0,
}

BALANCE = {
    "coin": "USDTBEAR", "free": 2320.2, "spotBorrow": 0.0, "total": 2340.2,
    "usdValue": 2340.2, "availableWithoutBorrow": 2320.2,
    "availableForWithdrawal": 2320.2,
}


class TestPayloadModels:
    def test_keyword_only(self):
        when = datetime(2019, 6, 2, 8, tzinfo=timezone.utc)
        rate = FundingRate(future="BTC-PERP", rate=Decimal("0.0025"), time=when)
        assert rate.rate == Decimal("0.0025")
        with pytest.raises(TypeError):
            FundingRate("BTC-PERP", Decimal("0.0025"), when)

    def test_required_fields_after_optional_ones(self):
        # Order declares optional client_id before the required market
        names = [f.name for f in msgspec.structs.fields(Order)]
        assert names.index("client_id") < names.index("market")
        future_fields = {f.name: f for f in msgspec.structs.fields(Future)}
        assert future_fields["volume_usd_24h"].required
        assert future_fields["volume_usd_24h"].encode_name == "volumeUsd24h"


class TestMarkets:
    def test_markets(self):
        markets = decode(GetMarkets, [MARKET])
        m = markets[0]
        assert m.name == "BTC-PERP"
        assert m.type is MarketType.FUTURE
        assert m.base_currency is None
        assert m.price_increment == Decimal("0.25")
        assert m.change_1h == Decimal("0.012")
        assert m.change_24h == Decimal("0.0299")
        assert m.quote_volume_24h == Decimal("28914.76")
        assert m.volume_usd_24h == Decimal("28914.76")

    def test_market_24h_price_range(self):
        market = decode(GetMarket, {**MARKET, "priceHigh24h": 10600.5, "priceLow24h": 10400})
        assert market.price_high_24h == Decimal("10600.5")
        assert market.price_low_24h == Decimal("10400")

    def test_orderbook(self):
        book = decode(GetOrderBook, {"asks": [[4114.25, 6.263]], "bids": [[4112.25, 49.29]]})
        assert book.asks[0] == (Decimal("4114.25"), Decimal("6.263"))

    def test_trades(self):
        trades = decode(GetTrades, [{
            "id": 3855995, "liquidation": False, "price": 3857.75, "side": "buy",
            "size": 0.111, "time": "2019-03-20T18:16:23.397991+00:00"}])
        assert trades[0].side is Side.BUY
        assert trades[0].time.tzinfo is not None

    def test_candles(self):
        candles = decode(GetCandles, [{
            "startTime": "2022-04-03T14:43:00+00:00", "time": 1648996980000,
            "open": 46371, "high": 46381, "low": 46371, "close": 46380,
            "volume": 1051438.0941}])
        assert candles[0].close == Decimal("46380")
        assert candles[0].start_time == datetime(2022, 4, 3, 14, 43, tzinfo=timezone.utc)


class TestFutures:
    def test_future(self):
        f = decode(GetFuture, FUTURE)
        assert f.type is FutureType.MOVE
        assert f.group is FutureGroup.DAILY
        assert f.open_interest_usd == Decimal("151654.1156")
        assert f.volume_usd_24h == Decimal("361892.0658")
        assert f.change_1h == Decimal("0.31140350877192985")

    def test_stats(self):
        stats = decode(GetFutureStats, {
            "volume": 1000.23, "nextFundingRate": 0.00025,
            "nextFundingTime": "2019-03-29T03:00:00+00:00", "expirationPrice": 3992.1,
            "predictedExpirationPrice": 3993.6, "strikePrice": 8182.35,
            "openInterest": 21124.583})
        assert stats.next_funding_rate == Decimal("0.00025")

    def test_funding_rates(self):
        rates = decode(GetFundingRates, [
            {"future": "BTC-PERP", "rate": 0.0025, "time": "2019-06-02T08:00:00+00:00"}])
        assert rates[0].future == "BTC-PERP"

    def test_expired_futures_without_activity_fields(self):
        expired = {k: v for k, v in FUTURE.items()
                   if k not in ("change1h", "change24h", "changeBod", "volumeUsd24h",
                                "volume", "openInterest", "openInterestUsd")}
        expired.update({"expired": True, "last": None, "bid": None, "ask": None,
                        "group": "weekly"})
        futures = decode(GetExpiredFutures, [expired])
        assert futures[0].expired is True
        assert futures[0].last is None


class TestIndices:
    def test_weights(self):
        weights = decode(GetIndexWeights, {"BCH": 0.3492, "XRP": 573.6345})
        assert weights == {"BCH": Decimal("0.3492"), "XRP": Decimal("573.6345")}

    def test_candles_volume_null(self):
        candles = decode(GetIndexCandles, [{
            "startTime": "2022-04-03T15:31:00+00:00", "time": 1648999860000,
            "open": 3999.0789733744436, "high": 3999.0789733744436,
            "low": 3996.910735872727, "close": 3996.910735872727, "volume": None}])
        assert candles[0].volume is None

    def test_constituents(self):
        rows = decode(GetIndexConstituents, [["binance", "BTC", "TUSD"],
                                             ["bitstamp", "BTC", "USD"]])
        assert rows[1] == ("bitstamp", "BTC", "USD")


class TestAccount:
    def test_account_information(self):
        info = decode(GetAccountInformation, {
            "accountIdentifier": 1338857, "accountType": None, "backstopProvider": False,
            "chargeInterestOnNegativeUsd": False, "collateral": 3.859272138279288,
            "freeCollateral": 3.859272138279288, "futuresLeverage": 3.0,
            "initialMarginRequirement": 0.33333333, "leverage": 3.0, "liquidating": False,
            "maintenanceMarginRequirement": 0.03, "makerFee": 0.00019, "takerFee": 0.000665,
            "totalAccountValue": 3568180.98341129, "totalPositionSize": 6384939.6992,
            "marginFraction": None, "openMarginFraction": None, "positionLimit": None,
            "positionLimitUsed": None, "useFttCollateral": False,
            "spotLendingEnabled": True, "spotMarginEnabled": True,
            "spotMarginWithdrawalsEnabled": True, "username": "user@domain.com",
            "positions": [POSITION]})
        assert info.leverage == Decimal("3.0")
        assert info.positions[0].future == "VET-PERP"

    def test_positions(self):
        positions = decode(GetPositions, [POSITION])
        assert positions[0].realized_pnl == Decimal("-5.2667467")
        assert positions[0].entry_price is None


class TestOrders:
    def test_open_orders(self):
        orders = decode(GetOpenOrders, [ORDER])
        assert orders[0].status is OrderStatus.OPEN
        assert orders[0].type is OrderType.LIMIT

    def test_order_status(self):
        order = decode(GetOrderStatus, ORDER)
        assert order.client_id == "your_client_order_id"

    def test_placed_order_without_fill(self):
        placed = dict(ORDER, avgFillPrice=None, filledSize=0, clientId=None)
        order = decode(PlaceOrder, placed)
        assert order.avg_fill_price is None
        assert order.filled_size == Decimal("0")

    def test_cancel_ack(self):
        assert decode(CancelOrder, "Order queued for cancelation") == \
            "Order queued for cancelation"


class TestFillsAndPayments:
    def test_fills(self):
        fills = decode(GetFills, [{
            "fee": 20.1374935, "feeCurrency": "USD", "feeRate": 0.0005,
            "future": "EOS-0329", "id": 11215, "liquidity": "taker", "market": "EOS-0329",
            "baseCurrency": None, "quoteCurrency": None, "orderId": 8436981,
            "tradeId": 1013912, "price": 4.201, "side": "buy", "size": 9587,
            "time": "2019-03-27T19:15:10.204619+00:00", "type": "order"}])
        assert fills[0].order_id == 8436981
        assert fills[0].fee == Decimal("20.1374935")

    def test_funding_payments(self):
        payments = decode(GetFundingPayments, [{
            "future": "ETH-PERP", "id": 33830, "payment": 0.0441342,
            "time": "2019-05-15T18:00:00+00:00", "rate": 0.0001}])
        assert payments[0].payment == Decimal("0.0441342")


class TestSpotMargin:
    def test_borrow_rates(self):
        rates = decode(GetBorrowRates, [{"coin": "BTC", "estimate": 1.45e-06,
                                         "previous": 1.44e-06}])
        assert rates[0].coin == "BTC"

    def test_borrow_summary(self):
        amounts = decode(GetDailyBorrowedAmounts, [{"coin": "BTC", "size": 120.1}])
        assert amounts[0].size == Decimal("120.1")

    def test_market_info(self):
        info = decode(GetBorrowMarketInfo, [{
            "coin": "USD", "borrowed": 0.0, "free": 69966.22310497,
            "estimatedRate": 1.027e-05, "previousRate": 1.027e-05}])
        assert info[0].estimated_rate > 0

    def test_borrow_history(self):
        history = decode(GetBorrowHistory, [{
            "coin": "USD", "cost": 0.0075789748770483, "feeUsd": 0.0075789748770483,
            "rate": 0.0000292815, "size": 258.83151058,
            "time": "2021-05-13T08:00:00+00:00"}])
        assert history[0].fee_usd == history[0].cost


class TestStatistics:
    def test_latency(self):
        stats = decode(GetLatencyStatistics, [
            {"bursty": True, "p50": 0.059, "requestCount": 43},
            {"bursty": False, "p50": 0.047, "requestCount": 27}])
        assert [s.request_count for s in stats] == [43, 27]


class TestSubaccounts:
    def test_list(self):
        subs = decode(GetSubaccounts, [{"nickname": "sub1", "deletable": True,
                                        "editable": True, "competition": True,
                                        "special": False}])
        assert subs[0].competition is True

    def test_create(self):
        sub = decode(CreateSubaccount, {"nickname": "sub2", "deletable": True,
                                        "editable": True, "special": False,
                                        "competition": False})
        assert sub.nickname == "sub2"

    def test_rename_returns_null(self):
        assert decode(ChangeSubaccountName, None) is None

    def test_balances(self):
        balances = decode(GetSubaccountBalances, [{
            "coin": "USDT", "free": 4321.2, "total": 4340.2, "spotBorrow": 0,
            "availableWithoutBorrow": 2320.2, "availableForWithdrawal": 2320.2,
            "usdValue": 4320.1}])
        assert balances[0].usd_value == Decimal("4320.1")

    def test_transfer(self):
        details = decode(TransferBetweenSubaccounts, {
            "id": 316450, "coin": "XRP", "size": 10000,
            "time": "2019-03-05T09:56:55.728933+00:00", "notes": "",
            "status": "complete"})
        assert details.id == 316450


class TestWallet:
    def test_coins(self):
        coins = decode(GetCoins, [{
            "bep2Asset": None, "canConvert": True, "canDeposit": False,
            "canWithdraw": False, "collateral": True, "collateralWeight": 1,
            "creditTo": None, "erc20Contract": None, "fiat": True, "hasTag": False,
            "hidden": False, "id": "USD", "imageUrl": None, "indexPrice": 1,
            "isEtf": False, "isToken": False, "methods": [], "name": "USD",
            "nftQuoteCurrencyEligible": True, "splMint": None, "spotMargin": True,
            "trc20Contract": None, "usdFungible": True, "imfWeight": 1.0}])
        assert coins[0].index_price == 1.0
        assert coins[0].methods == []

    def test_balances(self):
        balances = decode(GetBalances, [BALANCE])
        assert balances[0].coin == "USDTBEAR"

    def test_all_balances(self):
        result = decode(GetAllBalances, {"main": [BALANCE],
                                         "Battle Royale": [dict(BALANCE, coin="USD")]})
        assert set(result) == {"main", "Battle Royale"}
        assert result["Battle Royale"][0].coin == "USD"


@pytest.mark.parametrize("request_cls,result", [
    (GetMarkets, [MARKET]),
    (GetPositions, [POSITION]),
    (GetOpenOrders, [ORDER]),
])
def test_partial_matches_raw_result(request_cls, result):
    resp = Response(200, envelope(result), request_cls.RESPONSE)
    assert resp.deserialize_partial() == result
