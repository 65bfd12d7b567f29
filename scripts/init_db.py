"""테이블 생성 + 테스트 데이터 생성 스크립트

사용법:
    python scripts/init_db.py          # 테이블 생성 + 시드 데이터
    python scripts/init_db.py --reset  # 기존 테이블 삭제 후 재생성
"""
import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from db.base import Base
from db.models.company import Company
from db.models.job import Job
from db.session import engine, AsyncSessionLocal

TEST_COMPANIES = [
    {
        "handle": "ibm",
        "name": "IBM",
        "num_employees": 280000,
        "description": "International Business Machines",
        "logo_url": None,
    },
    {
        "handle": "anderson-arias-morrow",
        "name": "Anderson, Arias and Morrow",
        "num_employees": 245,
        "description": "Somebody program how I.",
        "logo_url": "/logos/logo3.png",
    },
]

TEST_JOBS = [
    {"title": "Backend Engineer", "salary": 120000, "equity": Decimal("0.01"), "company_handle": "ibm"},
    {"title": "Data Analyst", "salary": 90000, "equity": None, "company_handle": "ibm"},
    {"title": "Conservator", "salary": 52000, "equity": Decimal("0.05"),
     "company_handle": "anderson-arias-morrow"},
]


async def init_tables(reset: bool = False) -> None:
    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def seed() -> None:
    """모든 테스트 데이터 생성"""
    async with AsyncSessionLocal() as db:
        db.add_all(Company(**company) for company in TEST_COMPANIES)
        await db.flush()
        db.add_all(Job(**job) for job in TEST_JOBS)
        await db.commit()


async def main(reset: bool) -> None:
    await init_tables(reset)
    await seed()
    await engine.dispose()

    print("✅ 테이블 및 테스트 데이터 생성 완료!")
    print("\n🏢 테스트 회사:")
    for company in TEST_COMPANIES:
        print(f"   - {company['handle']}: {company['name']}")


if __name__ == "__main__":
    asyncio.run(main(reset="--reset" in sys.argv))
