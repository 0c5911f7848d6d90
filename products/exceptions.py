"""
Exceptions raised by the product persistence context.
"""


class ProductError(Exception):
    """Base class for product persistence errors"""


class ProductNotFoundError(ProductError):
    """Raised when a pending update targets a product that no longer exists"""

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product {product_id} does not exist")
