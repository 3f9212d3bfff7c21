class ExchangeServiceError(Exception):
    pass


class InvalidRequestError(ExchangeServiceError):
    pass


class NotFoundError(ExchangeServiceError):
    pass


class UpstreamUnavailableError(ExchangeServiceError):
    pass


class MalformedResponseError(ExchangeServiceError):
    pass
