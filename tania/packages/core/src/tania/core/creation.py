"""Task 创建流水线

按固定顺序校验字段，首个失败的规则决定抛出的 TaskError：
1. 标题非空
2. 截止时间（如有）不早于创建时间
3. 优先级非空且合法
4. 分类非空且合法
5. 领域变体存在
6. 资产 ID（如有）可通过对应领域的查询解析

除资产查询外无副作用；流水线内不做持久化。
"""

from collections.abc import Awaitable, Callable
from datetime import UTC, datetime

import structlog
from ulid import ULID

from .exceptions import TaskError, TaskErrorCode
from .models.domain import TaskDomain
from .models.enums import TaskCategory, TaskDomainCode, TaskPriority, TaskStatus
from .models.task import Task
from .query.protocols import TaskQueryService
from .result import ServiceResult

log = structlog.get_logger()


async def create_task(
    query_service: TaskQueryService,
    title: str,
    description: str,
    due_date: datetime | None,
    priority: str,
    domain: TaskDomain | None,
    category: str,
    asset_id: str | None,
    *,
    now: datetime | None = None,
) -> Task:
    """校验字段并创建新的 Task（status=CREATED）

    Args:
        query_service: 资产查询服务
        title: 标题
        description: 描述
        due_date: 截止时间，None 表示不设置；naive 时间按 UTC 处理
        priority: 优先级字符串，如 "URGENT"
        domain: 已构造的领域变体
        category: 分类字符串，如 "SANITATION"
        asset_id: 关联资产 ID，None 时跳过资产校验
        now: 创建时间，缺省为当前 UTC 时间

    Returns:
        新建的 Task

    Raises:
        TaskError: 任一字段校验失败
        Exception: 查询服务返回的基础设施错误，原样抛出
    """
    created_date = _as_utc(now) if now is not None else datetime.now(UTC)

    try:
        _validate_title(title)
        _validate_due_date(due_date, created_date)
        task_priority = _validate_priority(priority)
        task_category = _validate_category(category)
        if domain is None:
            raise TaskError(TaskErrorCode.DOMAIN_EMPTY)
        await _validate_asset_id(query_service, asset_id, domain)
    except TaskError as e:
        log.info("task_validation_failed", code=e.code.value)
        raise

    return Task(
        uid=str(ULID()),
        title=title,
        description=description or "",
        created_date=created_date,
        due_date=due_date,
        priority=task_priority,
        category=task_category,
        domain=domain,
        asset_id=asset_id,
        status=TaskStatus.CREATED,
    )


def _as_utc(value: datetime) -> datetime:
    """naive 时间视为 UTC，带时区的时间换算到 UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _validate_title(title: str) -> None:
    if not title or not title.strip():
        raise TaskError(TaskErrorCode.TITLE_EMPTY)


def _validate_due_date(due_date: datetime | None, created_date: datetime) -> None:
    # 与创建时间相等视为合法
    if due_date is not None and _as_utc(due_date) < created_date:
        raise TaskError(TaskErrorCode.DUE_DATE_INVALID)


def _validate_priority(priority: str) -> TaskPriority:
    if not priority:
        raise TaskError(TaskErrorCode.PRIORITY_EMPTY)
    try:
        return TaskPriority(priority)
    except ValueError:
        raise TaskError(TaskErrorCode.INVALID_PRIORITY) from None


def _validate_category(category: str) -> TaskCategory:
    if not category:
        raise TaskError(TaskErrorCode.CATEGORY_EMPTY)
    try:
        return TaskCategory(category)
    except ValueError:
        raise TaskError(TaskErrorCode.INVALID_CATEGORY) from None


def _asset_lookup(
    query_service: TaskQueryService,
    domain_code: str,
) -> Callable[[str], Awaitable[ServiceResult]] | None:
    """返回领域对应的资产查询方法；无资产登记表的领域返回 None"""
    if domain_code == TaskDomainCode.AREA:
        return query_service.find_area_by_id
    if domain_code == TaskDomainCode.CROP:
        return query_service.find_crop_by_id
    if domain_code == TaskDomainCode.INVENTORY:
        return query_service.find_material_by_id
    return None


async def _validate_asset_id(
    query_service: TaskQueryService,
    asset_id: str | None,
    domain: TaskDomain,
) -> None:
    if asset_id is None:
        return
    if not asset_id:
        raise TaskError(TaskErrorCode.INVALID_ASSET_ID)

    lookup = _asset_lookup(query_service, domain.code)
    if lookup is None:
        # FINANCE / GENERAL / RESERVOIR 不做存在性校验
        return

    result = await lookup(asset_id)
    if result.error is not None:
        raise result.error
    if result.result is None:
        raise TaskError(TaskErrorCode.INVALID_ASSET_ID)
