from sqlalchemy import Column, Integer, Numeric, Text
from product_service.db.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    description = Column(Text)
    price = Column(Numeric(10, 2), nullable=False, default=0, server_default="0.00")
    changed = Column(Integer)

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r} changed={self.changed}>"
