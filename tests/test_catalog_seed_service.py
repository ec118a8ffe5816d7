"""Tests for catalog seeding."""

import pytest

from src.services import SAMPLE_PRODUCTS, seed_catalog


class TestSeedCatalog:
    """Test seed_catalog."""

    @pytest.mark.asyncio
    async def test_seeds_empty_catalog(self, memory_repository):
        created = await seed_catalog(memory_repository)

        products = await memory_repository.list_all()
        assert created == len(SAMPLE_PRODUCTS)
        assert {p.name for p in products} == {p.name for p in SAMPLE_PRODUCTS}
        assert all(p.id for p in products)

    @pytest.mark.asyncio
    async def test_skips_populated_catalog(self, memory_repository, pen):
        await memory_repository.create(pen)

        created = await seed_catalog(memory_repository)

        assert created == 0
        assert len(await memory_repository.list_all()) == 1

    @pytest.mark.asyncio
    async def test_second_run_is_noop(self, memory_repository):
        await seed_catalog(memory_repository)
        created = await seed_catalog(memory_repository)

        assert created == 0
        assert len(await memory_repository.list_all()) == len(SAMPLE_PRODUCTS)

    @pytest.mark.asyncio
    async def test_sample_products_unchanged(self, memory_repository):
        await seed_catalog(memory_repository)
        assert all(p.id is None for p in SAMPLE_PRODUCTS)

    @pytest.mark.asyncio
    async def test_seeds_given_products(self, memory_repository, pen):
        created = await seed_catalog(memory_repository, products=(pen,))

        products = await memory_repository.list_all()
        assert created == 1
        assert [p.name for p in products] == ["Pen"]

    def test_sample_products_are_immutable(self):
        assert isinstance(SAMPLE_PRODUCTS, tuple)
