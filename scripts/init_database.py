"""
初始化排班数据库

功能:
1. 检查数据库连接
2. 创建缺失的表（不会删除或修改已有表）
3. 写入默认管理员和医院信息
4. 打印各表行数

使用方法:
    python3 scripts/init_database.py
    python3 scripts/init_database.py --database-url sqlite:///other.db
"""
import argparse
import logging
import sys
from pathlib import Path

# 添加项目根目录到路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from hospital_roster.config.settings import settings
from hospital_roster.database.db import get_engine, init_database
from hospital_roster.database.schema import Base


def check_connection(engine) -> bool:
    """检查数据库连接"""
    print("\n1. 检查数据库连接...")
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("   ✓ 连接成功")
        return True
    except SQLAlchemyError as e:
        print(f"   ❌ 连接失败: {e}")
        return False


def print_stats(engine):
    """打印数据库统计"""
    print("\n3. 数据库统计:")
    with engine.connect() as conn:
        for table in Base.metadata.sorted_tables:
            count = conn.execute(text(f"SELECT COUNT(*) FROM {table.name}")).scalar()
            print(f"   {table.name}: {count}")


def main():
    """主函数"""
    parser = argparse.ArgumentParser(description='初始化排班数据库')
    parser.add_argument('--database-url', default=settings.database_url, help='数据库连接 URL')
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    print("=" * 80)
    print("排班数据库初始化")
    print("=" * 80)
    print(f"\n数据库连接: {args.database_url}")

    engine = get_engine(args.database_url)
    try:
        if not check_connection(engine):
            sys.exit(1)

        print("\n2. 创建表并写入默认数据...")
        init_database(engine)

        print_stats(engine)
    finally:
        engine.dispose()

    print("\n" + "=" * 80)
    print("✅ 数据库初始化完成!")
    print("=" * 80)


if __name__ == "__main__":
    main()
