"""End-to-end tests for the catalog request pipeline.

Every request goes through Dispatcher -> Performance -> Validation ->
Transaction -> handler against a real SQLite database, one unit of work per
request.

Tests cover:
- Duplicate SKU rejected with a Failure, no extra row written
- Paging across 25 products (page 2 of 3)
- Soft delete hides the product from GetProductById but keeps the row
- Validation failures never reach the database
- A soft-deleted category keeps its name taken
- A fault or cancellation after the flush rolls the whole command back
- Commands are committed before dispatch returns; queries open no transaction
- Updates carrying a stale row version are rejected
"""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.application.commands import (
    CreateCategory,
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
)
from src.application.cqrs.dispatcher import Dispatcher
from src.application.cqrs.metadata import CommandMetadata, CQRSCategory
from src.application.cqrs.requests import Command
from src.application.errors import ApplicationErrorCode, to_application_error
from src.application.queries import GetProductById, ListProducts
from src.core.errors import ConcurrencyConflictError
from src.core.result import Failure, Success, ValidationFailure
from src.domain.protocols.unit_of_work_protocol import TransactionState, UnitOfWorkProtocol
from src.infrastructure.identity import CurrentUser
from src.infrastructure.persistence.models import Category, Product


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def dispatch(make_unit_of_work, mock_logger):
    """Dispatch one request on a fresh unit of work, as a caller would."""

    async def _dispatch(request, username="alice"):
        dispatcher = Dispatcher(
            make_unit_of_work(),
            mock_logger,
            CurrentUser(username=username),
        )
        return await dispatcher.dispatch(request)

    return _dispatch


async def create_category(dispatch, name="Peripherals"):
    result = await dispatch(CreateCategory(name=name))
    assert isinstance(result, Success)
    return result.value


def product_command(category_id, sku="SKU-1", **overrides) -> CreateProduct:
    values = {
        "name": f"Product {sku}",
        "sku": sku,
        "price": Decimal("19.99"),
        "category_id": category_id,
        "stock_quantity": 3,
    }
    values.update(overrides)
    return CreateProduct(**values)


# =============================================================================
# Test-local Command (fault injection after the flush)
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class ImportCategory(Command[UUID]):
    name: str
    after_save: Callable[[], Awaitable[None]]


class ImportCategoryHandler:
    """Saves a category, then hands control to the command's after_save."""

    def __init__(self, unit_of_work: UnitOfWorkProtocol) -> None:
        self._unit_of_work = unit_of_work

    async def handle(self, cmd: ImportCategory) -> Success[UUID]:
        category = Category(id=uuid7(), name=cmd.name, created_by="import")
        await self._unit_of_work.repository(Category).add(category)
        await self._unit_of_work.save_changes()
        await cmd.after_save()
        return Success(value=category.id)


def import_dispatcher(unit_of_work, logger) -> Dispatcher:
    return Dispatcher(
        unit_of_work,
        logger,
        registrations=[
            CommandMetadata(
                command_class=ImportCategory,
                handler_class=ImportCategoryHandler,
                category=CQRSCategory.CATEGORY,
            )
        ],
    )


# =============================================================================
# Create
# =============================================================================


@pytest.mark.integration
class TestCreateProduct:
    async def test_create_then_read_back(self, dispatch):
        category_id = await create_category(dispatch)

        created = await dispatch(product_command(category_id))
        assert isinstance(created, Success)

        result = await dispatch(GetProductById(product_id=created.value))

        assert isinstance(result, Success)
        dto = result.value
        assert dto.sku == "SKU-1"
        assert dto.price == Decimal("19.99")
        assert dto.category_name == "Peripherals"
        assert dto.created_by == "alice"
        assert dto.is_active is True

    async def test_duplicate_sku_fails_without_writing(
        self, dispatch, make_unit_of_work
    ):
        category_id = await create_category(dispatch)
        first = await dispatch(product_command(category_id, sku="SKU-1"))
        assert isinstance(first, Success)

        second = await dispatch(product_command(category_id, sku="SKU-1", name="Other"))

        assert isinstance(second, Failure)
        assert "SKU-1" in second.error
        assert to_application_error(second).code is ApplicationErrorCode.CONFLICT
        products = make_unit_of_work().repository(Product)
        assert await products.count() == 1

    async def test_unknown_category_is_not_found(self, dispatch):
        result = await dispatch(product_command(uuid7()))

        assert isinstance(result, Failure)
        assert to_application_error(result).code is ApplicationErrorCode.NOT_FOUND

    async def test_invalid_command_is_rejected_before_handler(
        self, dispatch, make_unit_of_work, mock_logger
    ):
        category_id = await create_category(dispatch)

        result = await dispatch(
            product_command(category_id, sku="bad sku", price=Decimal("0"))
        )

        assert isinstance(result, ValidationFailure)
        assert set(result.errors) == {"sku", "price"}
        assert await make_unit_of_work().repository(Product).count() == 0
        mock_logger.info.assert_any_call(
            "Request validation failed",
            request_name="CreateProduct",
            fields=["price", "sku"],
        )

    async def test_anonymous_caller_is_recorded_as_system(self, dispatch):
        category_id = await create_category(dispatch)

        created = await dispatch(product_command(category_id), username=None)
        result = await dispatch(GetProductById(product_id=created.value))

        assert result.value.created_by == "System"


# =============================================================================
# Paging
# =============================================================================


@pytest.mark.integration
class TestListProducts:
    async def test_second_page_of_three(self, dispatch):
        category_id = await create_category(dispatch)
        for i in range(25):
            result = await dispatch(product_command(category_id, sku=f"SKU-{i:02d}"))
            assert isinstance(result, Success)

        result = await dispatch(ListProducts(page_number=2, page_size=10))

        assert isinstance(result, Success)
        page = result.value
        assert len(page.items) == 10
        assert page.total_count == 25
        assert page.total_pages == 3
        assert page.has_previous_page is True
        assert page.has_next_page is True

    async def test_pages_cover_every_product_once(self, dispatch):
        category_id = await create_category(dispatch)
        for i in range(25):
            await dispatch(product_command(category_id, sku=f"SKU-{i:02d}"))

        skus: list[str] = []
        for page_number in (1, 2, 3):
            result = await dispatch(ListProducts(page_number=page_number, page_size=10))
            skus += [item.sku for item in result.value.items]

        assert len(skus) == 25
        assert set(skus) == {f"SKU-{i:02d}" for i in range(25)}
        # Newest first
        assert skus[0] == "SKU-24"
        assert skus[-1] == "SKU-00"

    async def test_filters(self, dispatch):
        peripherals = await create_category(dispatch, "Peripherals")
        audio = await create_category(dispatch, "Audio")
        keyboard = await dispatch(
            product_command(peripherals, sku="KB-1", name="Keyboard")
        )
        await dispatch(product_command(peripherals, sku="MS-1", name="Mouse"))
        await dispatch(product_command(audio, sku="HP-1", name="Headphones"))

        # Deactivate the keyboard
        current = (await dispatch(GetProductById(product_id=keyboard.value))).value
        await dispatch(
            UpdateProduct(
                product_id=current.id,
                name=current.name,
                sku=current.sku,
                price=current.price,
                category_id=current.category_id,
                stock_quantity=current.stock_quantity,
                is_active=False,
            )
        )

        by_category = (await dispatch(ListProducts(category_id=peripherals))).value
        with_inactive = (
            await dispatch(ListProducts(category_id=peripherals, include_inactive=True))
        ).value
        by_search = (await dispatch(ListProducts(search_term="phone"))).value

        assert [item.sku for item in by_category.items] == ["MS-1"]
        assert {item.sku for item in with_inactive.items} == {"KB-1", "MS-1"}
        assert [item.sku for item in by_search.items] == ["HP-1"]
        assert by_search.items[0].category_name == "Audio"

    async def test_search_ignores_case_and_literal_wildcards(self, dispatch):
        category_id = await create_category(dispatch)
        await dispatch(product_command(category_id, sku="KB-1", name="Keyboard"))
        await dispatch(product_command(category_id, sku="PCT-1", name="Sale 50% off"))

        by_upper = (await dispatch(ListProducts(search_term="KEYBOARD"))).value
        by_percent = (await dispatch(ListProducts(search_term="50%"))).value
        by_underscore = (await dispatch(ListProducts(search_term="_"))).value

        assert [item.sku for item in by_upper.items] == ["KB-1"]
        assert [item.sku for item in by_percent.items] == ["PCT-1"]
        assert by_underscore.items == []

    async def test_invalid_page_size(self, dispatch):
        result = await dispatch(ListProducts(page_size=0))

        assert isinstance(result, ValidationFailure)
        assert "page_size" in result.errors


# =============================================================================
# Soft Delete
# =============================================================================


@pytest.mark.integration
class TestDeleteProduct:
    async def test_soft_delete_hides_product(self, dispatch, make_unit_of_work):
        category_id = await create_category(dispatch)
        created = await dispatch(product_command(category_id))

        deleted = await dispatch(DeleteProduct(product_id=created.value))
        assert deleted == Success(value=True)

        result = await dispatch(GetProductById(product_id=created.value))
        assert isinstance(result, Failure)
        assert to_application_error(result).code is ApplicationErrorCode.NOT_FOUND

        row = await make_unit_of_work().repository(
            Product
        ).get_by_id_including_deleted(created.value)
        assert row is not None
        assert row.is_deleted is True
        assert row.deleted_at is not None
        assert row.deleted_by == "alice"

    async def test_deleted_product_is_not_listed(self, dispatch):
        category_id = await create_category(dispatch)
        created = await dispatch(product_command(category_id, sku="SKU-1"))
        await dispatch(product_command(category_id, sku="SKU-2"))
        await dispatch(DeleteProduct(product_id=created.value))

        page = (await dispatch(ListProducts())).value

        assert [item.sku for item in page.items] == ["SKU-2"]
        assert page.total_count == 1

    async def test_delete_twice_is_not_found(self, dispatch):
        category_id = await create_category(dispatch)
        created = await dispatch(product_command(category_id))
        await dispatch(DeleteProduct(product_id=created.value))

        result = await dispatch(DeleteProduct(product_id=created.value))

        assert isinstance(result, Failure)

    async def test_sku_of_deleted_product_stays_taken(self, dispatch):
        category_id = await create_category(dispatch)
        created = await dispatch(product_command(category_id, sku="SKU-1"))
        await dispatch(DeleteProduct(product_id=created.value))

        result = await dispatch(product_command(category_id, sku="SKU-1"))

        assert result == Failure(error="Product with SKU 'SKU-1' already exists")


# =============================================================================
# Transactions and Concurrency
# =============================================================================


@pytest.mark.integration
class TestPipelineTransactions:
    async def test_deleted_category_name_stays_taken(
        self, dispatch, make_unit_of_work
    ):
        # Soft-deleted categories keep their name in the unique index
        seeder = make_unit_of_work()
        archived = Category(id=uuid7(), name="Archived", created_by="seed")
        archived.mark_deleted("seed")
        await seeder.repository(Category).add(archived)
        await seeder.save_changes()

        result = await dispatch(CreateCategory(name="Archived"))

        assert result == Failure(error="Category with name 'Archived' already exists")
        rows = await make_unit_of_work().repository(Category).find_including_deleted()
        assert [row.id for row in rows] == [archived.id]

    async def test_fault_after_save_rolls_back(self, make_unit_of_work, mock_logger):
        async def feed_closed():
            raise RuntimeError("import feed closed")

        uow = make_unit_of_work()

        with pytest.raises(RuntimeError, match="import feed closed"):
            await import_dispatcher(uow, mock_logger).dispatch(
                ImportCategory(name="Imported", after_save=feed_closed)
            )

        assert uow.transaction_state is TransactionState.ROLLED_BACK
        assert await make_unit_of_work().repository(Category).count() == 0
        assert mock_logger.error.call_args.args[0] == "Transaction failed, rolling back"

    async def test_cancelled_dispatch_rolls_back(self, make_unit_of_work, mock_logger):
        saved = asyncio.Event()

        async def stall():
            saved.set()
            await asyncio.Event().wait()

        uow = make_unit_of_work()
        task = asyncio.create_task(
            import_dispatcher(uow, mock_logger).dispatch(
                ImportCategory(name="Imported", after_save=stall)
            )
        )
        await saved.wait()

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert uow.transaction_state is TransactionState.ROLLED_BACK
        assert await make_unit_of_work().repository(Category).count() == 0

    async def test_query_opens_no_transaction(self, make_unit_of_work, mock_logger):
        uow = make_unit_of_work()

        await Dispatcher(uow, mock_logger).dispatch(ListProducts())

        assert uow.transaction_state is TransactionState.IDLE

    async def test_command_is_committed_before_return(
        self, make_unit_of_work, mock_logger
    ):
        uow = make_unit_of_work()

        result = await Dispatcher(uow, mock_logger).dispatch(
            CreateCategory(name="Books")
        )

        assert uow.transaction_state is TransactionState.COMMITTED
        found = await make_unit_of_work().repository(Category).get_by_id(result.value)
        assert found.created_by == "System"

    async def test_update_with_row_version(self, dispatch):
        category_id = await create_category(dispatch)
        created = await dispatch(product_command(category_id))
        loaded = (await dispatch(GetProductById(product_id=created.value))).value

        def update(row_version, name):
            return UpdateProduct(
                product_id=loaded.id,
                name=name,
                sku=loaded.sku,
                price=loaded.price,
                category_id=loaded.category_id,
                stock_quantity=loaded.stock_quantity,
                row_version=row_version,
            )

        first = await dispatch(update(loaded.row_version, "First edit"), username="bob")
        assert first == Success(value=True)

        with pytest.raises(ConcurrencyConflictError):
            await dispatch(update(loaded.row_version, "Second edit"), username="carol")

        current = (await dispatch(GetProductById(product_id=created.value))).value
        assert current.name == "First edit"
        assert current.row_version != loaded.row_version
