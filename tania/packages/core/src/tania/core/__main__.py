"""CLI 入口模块 -- python -m tania.core <command>

支持的命令：
  init-db            初始化 SQLite 数据库
  list-tasks         列出全部任务
  set-due <task_id>  将任务标记为到期（供外部定时触发）
"""

import asyncio
import sys

from .config import get_db_path

_USAGE = """用法: python -m tania.core <command>
命令:
  init-db            初始化 SQLite 数据库
  list-tasks         列出全部任务
  set-due <task_id>  将任务标记为到期"""


def main(argv: list[str] | None = None) -> int:
    """CLI 主入口，返回进程退出码"""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(_USAGE)
        return 1

    command = args[0]

    if command == "init-db":
        return asyncio.run(init_database())
    if command == "list-tasks":
        return asyncio.run(list_tasks())
    if command == "set-due":
        if len(args) < 2:
            print("缺少参数: task_id")
            return 1
        return asyncio.run(set_due(args[1]))

    print(f"未知命令: {command}")
    print("可用命令: init-db, list-tasks, set-due")
    return 1


async def init_database() -> int:
    """创建数据库文件与表结构"""
    from .store import create_store_group

    db_path = get_db_path()
    print(f"数据库路径: {db_path}")

    store_group = await create_store_group(db_path)
    await store_group.close()
    print("初始化完成")
    return 0


async def list_tasks() -> int:
    """按创建时间倒序打印任务"""
    from .store import create_store_group

    store_group = await create_store_group(get_db_path())
    try:
        result = await store_group.task_repo.find_all()
        for task in result.unwrap():
            print(f"{task.uid}  {task.status.value:<10} {task.category.value:<12} {task.title}")
    finally:
        await store_group.close()
    return 0


async def set_due(task_id: str) -> int:
    """将任务流转为 DUE 并保存"""
    from .store import create_store_group

    store_group = await create_store_group(get_db_path())
    try:
        result = await store_group.task_repo.find_by_id(task_id)
        task = result.unwrap()
        if task is None:
            print(f"任务不存在: {task_id}")
            return 1

        task.set_as_due()
        (await store_group.task_repo.save(task)).unwrap()
        print(f"{task.uid}  {task.status.value}")
    finally:
        await store_group.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
