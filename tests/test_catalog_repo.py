from pos_checkout.data.seed import sample_products
from pos_checkout.repos.catalog_repo import CatalogRepo


def test_lookups(catalog):
    assert catalog.get_product("2").name == "Brake Fluid DOT 4"
    assert catalog.get_product("99") is None
    assert catalog.find_variant("3", "COOL-5L").size == "5L Jar"
    assert catalog.find_variant("3", "OIL-1L") is None
    assert catalog.find_variant("99", "OIL-1L") is None


def test_adjust_stock_default_does_not_touch_records(catalog):
    assert catalog.adjust_stock("1", "OIL-1L", -10) == 1
    assert catalog.adjust_stock("99", "NOPE", -10) == 1
    assert catalog.find_variant("1", "OIL-1L").stock == 100


def test_adjust_stock_applied():
    catalog = CatalogRepo(sample_products(), apply_stock_updates=True)

    assert catalog.adjust_stock("1", "OIL-1L", -10) == 1
    assert catalog.find_variant("1", "OIL-1L").stock == 90

    assert catalog.adjust_stock("1", "OIL-1L", 5) == 1
    assert catalog.find_variant("1", "OIL-1L").stock == 95


def test_adjust_stock_applied_clamps_at_zero_and_skips_unknown():
    catalog = CatalogRepo(sample_products(), apply_stock_updates=True)

    catalog.adjust_stock("3", "COOL-20L", -100)
    assert catalog.find_variant("3", "COOL-20L").stock == 0
    assert catalog.adjust_stock("99", "NOPE", -1) == 0


def test_sample_products_are_independent_copies():
    first = CatalogRepo(sample_products(), apply_stock_updates=True)
    second = CatalogRepo(sample_products())

    first.adjust_stock("1", "OIL-1L", -50)

    assert second.find_variant("1", "OIL-1L").stock == 100
