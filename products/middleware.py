from .context import ProductContext


class ProductContextMiddleware:
    """
    Attach a fresh ProductContext to every request as
    request.product_context.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.product_context = ProductContext()
        return self.get_response(request)
