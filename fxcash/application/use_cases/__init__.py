"""Application use cases."""

from .base import UseCase, UseCaseRequest, UseCaseResponse
from .cash import (
    EnsureCurrencyFeedsRequest,
    EnsureCurrencyFeedsResponse,
    EnsureCurrencyFeedsUseCase,
    GetCashBalancesRequest,
    GetCashBalancesResponse,
    GetCashBalancesUseCase,
    UpdateConversionRatesRequest,
    UpdateConversionRatesResponse,
    UpdateConversionRatesUseCase,
)

__all__ = [
    "UseCase",
    "UseCaseRequest",
    "UseCaseResponse",
    "EnsureCurrencyFeedsRequest",
    "EnsureCurrencyFeedsResponse",
    "EnsureCurrencyFeedsUseCase",
    "UpdateConversionRatesRequest",
    "UpdateConversionRatesResponse",
    "UpdateConversionRatesUseCase",
    "GetCashBalancesRequest",
    "GetCashBalancesResponse",
    "GetCashBalancesUseCase",
]
