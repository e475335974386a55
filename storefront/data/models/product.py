from sqlalchemy import Column, String, Text

from storefront.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    # exact decimal string, e.g. "1299.99"
    price = Column(String, nullable=False)
    image = Column(String, nullable=False)
    category = Column(String, nullable=False)
