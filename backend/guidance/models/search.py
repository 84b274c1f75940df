from sqlalchemy import Column, Text
from guidance.database import Base


class Search(Base):
    __tablename__ = "searches"

    id = Column(Text, primary_key=True)
    type = Column(Text, nullable=False)
    query = Column(Text, nullable=False)
    created_at = Column(Text, nullable=False)
