"""Endpoint descriptors, one module per exchange API section.

Descriptors are re-exported here so callers can write::

    from ftx_rest.endpoints import GetMarket, PlaceOrder
"""
from ftx_rest.endpoints.account import (
    ChangeAccountLeverage,
    GetAccountInformation,
    GetPositions,
)
from ftx_rest.endpoints.fills import GetFills
from ftx_rest.endpoints.funding_payments import GetFundingPayments
from ftx_rest.endpoints.futures import (
    GetExpiredFutures,
    GetFundingRates,
    GetFuture,
    GetFutures,
    GetFutureStats,
)
from ftx_rest.endpoints.indices import (
    GetIndexCandles,
    GetIndexConstituents,
    GetIndexWeights,
)
from ftx_rest.endpoints.markets import (
    GetCandles,
    GetMarket,
    GetMarkets,
    GetOrderBook,
    GetTrades,
)
from ftx_rest.endpoints.orders import (
    CancelAllOrders,
    CancelOrder,
    EditOrder,
    GetOpenOrders,
    GetOrderHistory,
    GetOrderStatus,
    OrderOpts,
    PlaceOrder,
)
from ftx_rest.endpoints.spot_margin import (
    GetBorrowHistory,
    GetBorrowMarketInfo,
    GetBorrowRates,
    GetDailyBorrowedAmounts,
)
from ftx_rest.endpoints.statistics import GetLatencyStatistics
from ftx_rest.endpoints.subaccounts import (
    ChangeSubaccountName,
    CreateSubaccount,
    DeleteSubaccount,
    GetSubaccountBalances,
    GetSubaccounts,
    TransferBetweenSubaccounts,
)
from ftx_rest.endpoints.wallet import GetAllBalances, GetBalances, GetCoins

__all__ = [
    "ChangeAccountLeverage",
    "GetAccountInformation",
    "GetPositions",
    "GetFills",
    "GetFundingPayments",
    "GetExpiredFutures",
    "GetFundingRates",
    "GetFuture",
    "GetFutures",
    "GetFutureStats",
    "GetIndexCandles",
    "GetIndexConstituents",
    "GetIndexWeights",
    "GetCandles",
    "GetMarket",
    "GetMarkets",
    "GetOrderBook",
    "GetTrades",
    "CancelAllOrders",
    "CancelOrder",
    "EditOrder",
    "GetOpenOrders",
    "GetOrderHistory",
    "GetOrderStatus",
    "OrderOpts",
    "PlaceOrder",
    "GetBorrowHistory",
    "GetBorrowMarketInfo",
    "GetBorrowRates",
    "GetDailyBorrowedAmounts",
    "GetLatencyStatistics",
    "ChangeSubaccountName",
    "CreateSubaccount",
    "DeleteSubaccount",
    "GetSubaccountBalances",
    "GetSubaccounts",
    "TransferBetweenSubaccounts",
    "GetAllBalances",
    "GetBalances",
    "GetCoins",
]
