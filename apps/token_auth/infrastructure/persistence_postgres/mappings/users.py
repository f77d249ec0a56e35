"""Users Table.

사용자 저장소 테이블 정의입니다. 이 서비스는 읽기만 수행합니다.
"""

from sqlalchemy import BigInteger, Column, DateTime, MetaData, String, Table, Text

metadata = MetaData()

users_table = Table(
    "users",
    metadata,
    Column("id", BigInteger, primary_key=True),
    Column("real_id", String(255), nullable=False, unique=True, index=True),
    Column("nickname", Text),
    Column("name", Text),
    Column("role", String(32), nullable=False),
    Column("deleted_at", DateTime(timezone=True)),
)
