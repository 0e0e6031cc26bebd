"""Unit tests for the order repository: atomic creation and aggregate reads."""

from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from conftest import count_rows, reject_items_named
from order_service.errors import OrderValidationError, PersistenceError
from order_service.repositories.order_repository import OrderRepository, calculate_total
from order_service.schemas.order import OrderItemCreate


def make_items(*specs):
    return [
        OrderItemCreate(game_name=name, price=Decimal(price), quantity=quantity)
        for name, price, quantity in specs
    ]


class TestCalculateTotal:
    def test_exact_decimal_sum(self):
        items = make_items(("Cyber Quest", "19.99", 2), ("Pixel Run", "5.00", 1))
        assert calculate_total(items) == Decimal("44.98")

    def test_no_float_drift(self):
        items = make_items(("Coin", "0.10", 1), ("Coin", "0.20", 1))
        assert calculate_total(items) == Decimal("0.30")

    def test_quantity_defaults_to_one(self):
        item = OrderItemCreate(game_name="Pixel Run", price=Decimal("12.50"))
        assert item.quantity == 1
        assert calculate_total([item]) == Decimal("12.50")


class TestCreateWithItems:
    def test_persists_order_and_items(self, order_database):
        items = make_items(("Cyber Quest", "19.99", 2), ("Pixel Run", "5.00", 1))

        with order_database.session() as db:
            order = OrderRepository(db).create_with_items("player@example.com", items)

            assert order.id is not None
            assert order.customer_email == "player@example.com"
            assert order.total_price == Decimal("44.98")
            assert order.status == "pending"
            assert order.created_at is not None
            assert [(i.game_name, i.price, i.quantity) for i in order.items] == [
                ("Cyber Quest", Decimal("19.99"), 2),
                ("Pixel Run", Decimal("5.00"), 1),
            ]
            assert all(i.order_id == order.id for i in order.items)
            assert len({i.id for i in order.items}) == 2

    def test_read_after_write_in_new_session(self, order_database):
        items = make_items(("Cyber Quest", "19.99", 2), ("Pixel Run", "5.00", 1), ("Pixel Run", "5.00", 1))

        with order_database.session() as db:
            order_id = OrderRepository(db).create_with_items("player@example.com", items).id

        with order_database.session() as db:
            stored = OrderRepository(db).get_by_id(order_id)
            triples = sorted((i.game_name, i.price, i.quantity) for i in stored.items)

        assert triples == sorted((i.game_name, i.price, i.quantity) for i in items)

    def test_failure_on_later_item_leaves_no_rows(self, order_database):
        reject_items_named(order_database, "Forbidden Game")
        items = make_items(
            ("Cyber Quest", "19.99", 1),
            ("Pixel Run", "5.00", 1),
            ("Forbidden Game", "9.99", 1),
        )

        with order_database.session() as db:
            with pytest.raises(PersistenceError):
                OrderRepository(db).create_with_items("player@example.com", items)

        assert count_rows(order_database, "orders") == 0
        assert count_rows(order_database, "order_items") == 0

    def test_session_usable_after_rollback(self, order_database):
        reject_items_named(order_database, "Forbidden Game")

        with order_database.session() as db:
            repository = OrderRepository(db)
            with pytest.raises(PersistenceError):
                repository.create_with_items("player@example.com", make_items(("Forbidden Game", "1.00", 1)))
            order = repository.create_with_items("player@example.com", make_items(("Pixel Run", "1.00", 1)))

        assert count_rows(order_database, "orders") == 1
        assert len(order.items) == 1

    @pytest.mark.parametrize(
        "customer_email, items",
        [
            ("player@example.com", []),
            ("", make_items(("Pixel Run", "5.00", 1))),
            ("player@example.com", [OrderItemCreate.model_construct(game_name="Pixel Run", price=Decimal("-1.00"), quantity=1)]),
            ("player@example.com", [OrderItemCreate.model_construct(game_name="Pixel Run", price=Decimal("5.00"), quantity=0)]),
            ("player@example.com", [OrderItemCreate.model_construct(game_name=" ", price=Decimal("5.00"), quantity=1)]),
            ("player@example.com", [OrderItemCreate.model_construct(game_name="Pixel Run", price=Decimal("0.01"), quantity=2 ** 31)]),
            ("player@example.com", make_items(("Collector Bundle", "99999999.99", 1), ("Pixel Run", "0.01", 1))),
        ],
    )
    def test_invalid_request_never_touches_store(self, order_database, customer_email, items):
        with order_database.session() as db:
            with pytest.raises(OrderValidationError):
                OrderRepository(db).create_with_items(customer_email, items)

        assert count_rows(order_database, "orders") == 0
        assert count_rows(order_database, "order_items") == 0

    def test_concurrent_creations_do_not_mix_items(self, order_database):
        def create(n):
            items = make_items((f"Game {n}-a", "10.00", 1), (f"Game {n}-b", "2.50", n))
            with order_database.session() as db:
                order = OrderRepository(db).create_with_items(f"player{n}@example.com", items)
                return order.id, n

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(create, range(1, 9)))

        assert len({order_id for order_id, _ in results}) == 8

        with order_database.session() as db:
            repository = OrderRepository(db)
            for order_id, n in results:
                order = repository.get_by_id(order_id)
                assert order.customer_email == f"player{n}@example.com"
                assert sorted(i.game_name for i in order.items) == [f"Game {n}-a", f"Game {n}-b"]
                assert order.total_price == Decimal("10.00") + Decimal("2.50") * n

        assert count_rows(order_database, "order_items") == 16


class TestReadsAndStatus:
    def test_get_all_newest_first_with_items(self, order_database):
        with order_database.session() as db:
            repository = OrderRepository(db)
            first = repository.create_with_items("a@example.com", make_items(("Pixel Run", "5.00", 1)))
            second = repository.create_with_items("b@example.com", make_items(("Cyber Quest", "19.99", 3)))
            first_id, second_id = first.id, second.id

        with order_database.session() as db:
            orders = OrderRepository(db).get_all()

        assert [o.id for o in orders] == [second_id, first_id]
        assert [i.game_name for i in orders[0].items] == ["Cyber Quest"]
        assert [i.game_name for i in orders[1].items] == ["Pixel Run"]

    def test_get_by_id_missing(self, order_database):
        with order_database.session() as db:
            assert OrderRepository(db).get_by_id(99999999) is None

    def test_update_status_changes_only_status(self, order_database):
        with order_database.session() as db:
            created = OrderRepository(db).create_with_items(
                "player@example.com", make_items(("Pixel Run", "5.00", 2))
            )
            order_id = created.id

        with order_database.session() as db:
            updated = OrderRepository(db).update_status(order_id, "shipped")
            assert updated.status == "shipped"

        with order_database.session() as db:
            order = OrderRepository(db).get_by_id(order_id)
            assert order.status == "shipped"
            assert order.customer_email == "player@example.com"
            assert order.total_price == Decimal("10.00")
            assert [(i.game_name, i.quantity) for i in order.items] == [("Pixel Run", 2)]

    def test_update_status_missing(self, order_database):
        with order_database.session() as db:
            assert OrderRepository(db).update_status(99999999, "paid") is None
