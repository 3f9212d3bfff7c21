from .base import BaseAPIClient
from .exchangerates import ExchangeRatesClient
from .restcountries import RestCountriesClient

__all__ = ['BaseAPIClient', 'ExchangeRatesClient', 'RestCountriesClient']
