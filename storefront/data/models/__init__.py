# import all models so SQLAlchemy registers them in Base.metadata

from storefront.data.models.product import ProductModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.order import OrderModel
from storefront.data.models.wishlist_item import WishlistItemModel

__all__ = ["ProductModel", "CartItemModel", "OrderModel", "WishlistItemModel"]
