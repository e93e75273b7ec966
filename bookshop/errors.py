class CheckoutError(Exception):
    """Base class for errors surfaced to the shopper."""


class SelectionError(CheckoutError):
    """No catalog item matches the request."""


class GatewayError(CheckoutError):
    """The payment gateway rejected or failed a call."""


class MissingReference(CheckoutError):
    """A return redirect arrived without the identifier it should carry."""
