# pos_checkout/repos/catalog_repo.py
from typing import Dict, Iterable, List, Optional

from pos_checkout.domain.schemas import Product, ProductVariant
from pos_checkout.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogRepo:
    """
    Process-local product catalog.

    adjust_stock only acknowledges the request unless apply_stock_updates
    is set, in which case the delta is written to the variant (never below 0).
    """

    def __init__(self, products: Iterable[Product], apply_stock_updates: bool = False):
        self._products: Dict[str, Product] = {p.id: p for p in products}
        self.apply_stock_updates = apply_stock_updates

    def get_products(self) -> List[Product]:
        return list(self._products.values())

    def get_product(self, product_id: str) -> Product | None:
        return self._products.get(product_id)

    def find_variant(self, product_id: str, sku: str) -> Optional[ProductVariant]:
        product = self.get_product(product_id)
        if not product:
            return None
        return product.find_variant(sku)

    def adjust_stock(self, product_id: str, sku: str, delta: int) -> int:
        """Returns the number of modified variants."""
        logger.info(f"Stock update requested: product={product_id} sku={sku} delta={delta}")

        if not self.apply_stock_updates:
            return 1

        variant = self.find_variant(product_id, sku)
        if not variant:
            logger.warning(f"Stock update for unknown variant {product_id}/{sku}")
            return 0

        new_stock = variant.stock + delta
        if new_stock < 0:
            logger.warning(
                f"Stock for {product_id}/{sku} would drop to {new_stock}, clamping at 0"
            )
            new_stock = 0

        variant.stock = new_stock
        return 1
