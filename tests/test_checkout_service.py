"""
Checkout: validation, empty cart, order snapshot and all-or-nothing commit.
"""
from decimal import Decimal

import pytest

from storefront.data.models.order import OrderModel
from storefront.data.models.product import ProductModel
from storefront.domain.errors import StateError, StoreError, ValidationError
from storefront.services.cart_service import CartService
from storefront.services.checkout_service import CheckoutService, order_number, validate_checkout
from storefront.services.order_service import OrderService
from tests.conftest import SESSION


@pytest.fixture
def hundred(db):
    db.add(ProductModel(
        id="test-100",
        name="Hundred",
        description="Costs exactly one hundred",
        price="100.00",
        image="https://example.com/h.png",
        category="Test",
    ))
    db.commit()
    return "test-100"


class TestValidation:

    def test_valid_form_is_normalized(self):
        form = validate_checkout("  Jane Doe ", "jane@example.com")
        assert form.customer_name == "Jane Doe"
        assert form.customer_email == "jane@example.com"

    def test_email_kept_as_submitted(self):
        form = validate_checkout("Jane Doe", "Jane@Example.COM")
        assert form.customer_email == "Jane@Example.COM"

    def test_special_use_domain_accepted(self):
        form = validate_checkout("Jane Doe", "jane@foo.test")
        assert form.customer_email == "jane@foo.test"

    def test_lists_every_bad_field(self):
        with pytest.raises(ValidationError) as exc:
            validate_checkout("J", "not-an-email")

        fields = sorted(d.field for d in exc.value.details)
        assert fields == ["customerEmail", "customerName"]

    def test_invalid_data_creates_no_order(self, db, hundred):
        CartService(db).add(SESSION, hundred, 1)

        with pytest.raises(ValidationError):
            CheckoutService(db).checkout(SESSION, "", "jane@example.com")

        assert db.query(OrderModel).count() == 0
        assert len(CartService(db).list_items(SESSION)) == 1


class TestCheckout:

    def test_empty_cart(self, db):
        with pytest.raises(StateError):
            CheckoutService(db).checkout(SESSION, "Jane Doe", "jane@example.com")

        assert db.query(OrderModel).count() == 0

    def test_receipt(self, db, hundred):
        CartService(db).add(SESSION, hundred, 2)

        receipt = CheckoutService(db).checkout(SESSION, "Jane Doe", "jane@example.com")

        assert receipt.total == "200.00"
        assert receipt.order_number == receipt.id.split("-")[0].upper()
        assert receipt.customer_name == "Jane Doe"
        assert len(receipt.items) == 1
        assert receipt.items[0].product_name == "Hundred"
        assert receipt.items[0].quantity == 2
        # receipt lines show the line total
        assert receipt.items[0].price == "200.00"

    def test_order_stores_unit_price_snapshot(self, db, hundred):
        CartService(db).add(SESSION, hundred, 2)
        receipt = CheckoutService(db).checkout(SESSION, "Jane Doe", "jane@example.com")

        order = db.get(OrderModel, receipt.id)

        assert order.total == "200.00"
        assert order.created_at == receipt.timestamp
        line = order.items[0]
        assert (line.product_id, line.product_name, line.quantity, line.price) == (
            hundred, "Hundred", 2, "100.00",
        )

    def test_order_keeps_submitted_email(self, db, hundred):
        CartService(db).add(SESSION, hundred, 1)

        receipt = CheckoutService(db).checkout(SESSION, "Jane Doe", "Jane@Example.COM")

        assert receipt.customer_email == "Jane@Example.COM"
        assert db.get(OrderModel, receipt.id).customer_email == "Jane@Example.COM"

    def test_cart_is_cleared(self, db, hundred):
        cart = CartService(db)
        cart.add(SESSION, hundred, 1)
        cart.add(SESSION, "prod-1", 1)

        CheckoutService(db).checkout(SESSION, "Jane Doe", "jane@example.com")

        assert cart.list_items(SESSION) == []

    def test_other_session_cart_untouched(self, db, hundred):
        cart = CartService(db)
        cart.add(SESSION, hundred, 1)
        cart.add("other", hundred, 1)

        CheckoutService(db).checkout(SESSION, "Jane Doe", "jane@example.com")

        assert len(cart.list_items("other")) == 1
        assert OrderService(db).list_orders("other") == []

    def test_snapshot_survives_catalog_changes(self, db, hundred):
        CartService(db).add(SESSION, hundred, 3)
        receipt = CheckoutService(db).checkout(SESSION, "Jane Doe", "jane@example.com")

        product = db.get(ProductModel, hundred)
        product.price = "1.00"
        product.name = "Renamed"
        db.commit()
        db.delete(product)
        db.commit()
        db.expire_all()

        line = db.get(OrderModel, receipt.id).items[0]
        assert line.product_name == "Hundred"
        assert line.price == "100.00"
        assert line.quantity == 3

    def test_total_uses_decimal_arithmetic(self, db):
        cart = CartService(db)
        cart.add(SESSION, "prod-4", 3)  # 349.99
        cart.add(SESSION, "prod-7", 1)  # 249.99

        receipt = CheckoutService(db).checkout(SESSION, "Jane Doe", "jane@example.com")

        assert receipt.total == "1299.96"
        assert sum(Decimal(l.price) for l in receipt.items) == Decimal("1299.96")

    def test_failed_clear_rolls_back_order(self, db, hundred, monkeypatch):
        CartService(db).add(SESSION, hundred, 1)

        def broken_clear(self, session_id, commit=True):
            raise StoreError("Storage operation failed")

        monkeypatch.setattr(CartService, "clear", broken_clear)

        with pytest.raises(StoreError):
            CheckoutService(db).checkout(SESSION, "Jane Doe", "jane@example.com")

        assert db.query(OrderModel).count() == 0
        assert len(CartService(db).list_items(SESSION)) == 1


class TestOrderNumber:

    def test_first_segment_upper_cased(self):
        assert order_number("3f2a9c1b-aaaa-bbbb-cccc-dddddddddddd") == "3F2A9C1B"


class TestOrderHistory:

    def test_newest_first(self, db, hundred):
        cart = CartService(db)
        checkout = CheckoutService(db)

        cart.add(SESSION, hundred, 1)
        first = checkout.checkout(SESSION, "Jane Doe", "jane@example.com")
        cart.add(SESSION, hundred, 2)
        second = checkout.checkout(SESSION, "Jane Doe", "jane@example.com")

        orders = OrderService(db).list_orders(SESSION)

        assert [o.id for o in orders] == [second.id, first.id]
        assert [o.total for o in orders] == ["200.00", "100.00"]
