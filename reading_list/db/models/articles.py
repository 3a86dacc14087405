from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text, false

from .base import Base, now_utc

TITLE_MAX_LENGTH = 512


class Article(Base):
    __tablename__ = 'app_article'
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    url = Column(Text, nullable=False)
    is_read = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    __table_args__ = (
        Index('article_created_idx', 'created_at'),
    )

    def __repr__(self):
        return f"<Article id={self.id} is_read={self.is_read} url={self.url!r}>"
