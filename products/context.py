"""
Request-scoped persistence context for products.

Views never touch Product.objects directly. Each request gets its own
ProductContext (see products.middleware); reads hit the database
immediately, writes are queued with add/update/remove and committed
together by save_changes().
"""
import logging

from django.db import DEFAULT_DB_ALIAS, transaction

from .exceptions import ProductNotFoundError
from .models import Product

logger = logging.getLogger(__name__)


class ProductContext:

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using
        self._added = []
        self._modified = []
        self._removed = []

    @property
    def products(self):
        return Product.objects.using(self.using)

    @property
    def has_changes(self):
        return bool(self._added or self._modified or self._removed)

    # --- Reads ----------------------------------------------------------------

    def all(self):
        """Return every product in insertion order"""
        return list(self.products.order_by('pk'))

    def find(self, product_id):
        """Return the product with this id, or None"""
        if product_id is None:
            return None
        try:
            return self.products.get(pk=product_id)
        except Product.DoesNotExist:
            return None

    def exists(self, product_id):
        if product_id is None:
            return False
        return self.products.filter(pk=product_id).exists()

    # --- Pending writes -------------------------------------------------------

    def add(self, product):
        """Queue a new product; the store assigns its id on save_changes()"""
        product.pk = None
        self._added.append(product)
        return product

    def update(self, product):
        """Queue an overwrite of the stored row matching product.pk"""
        self._modified.append(product)
        return product

    def remove(self, product):
        self._removed.append(product)
        return product

    def discard_changes(self):
        self._added.clear()
        self._modified.clear()
        self._removed.clear()

    def save_changes(self):
        """
        Commit all pending changes in one transaction.
        Returns the number of rows written. Raises ProductNotFoundError
        (and rolls back) if an update targets a row that does not exist.
        """
        if not self.has_changes:
            return 0

        written = 0
        with transaction.atomic(using=self.using):
            for product in self._added:
                product.save(using=self.using, force_insert=True)
                logger.info("Created product %s (%s)", product.pk, product.name)
                written += 1

            for product in self._modified:
                updated = self.products.filter(pk=product.pk).update(
                    name=product.name,
                    price=product.price,
                    description=product.description,
                )
                if not updated:
                    logger.warning("Update of missing product %s", product.pk)
                    raise ProductNotFoundError(product.pk)
                logger.info("Updated product %s", product.pk)
                written += updated

            for product in self._removed:
                deleted, _ = self.products.filter(pk=product.pk).delete()
                logger.info("Deleted product %s", product.pk)
                written += deleted

        self.discard_changes()
        return written
