"""内存查询服务 -- 基于 AssetRegistry 的 TaskQueryService 实现"""

from ..models.query import AreaSummary, CropSummary, MaterialSummary
from ..result import ResultChannel


class AssetRegistry:
    """内存资产登记表，由资产子系统写入"""

    def __init__(self) -> None:
        self.areas: dict[str, AreaSummary] = {}
        self.crops: dict[str, CropSummary] = {}
        self.materials: dict[str, MaterialSummary] = {}

    def add_area(self, area: AreaSummary) -> None:
        self.areas[area.uid] = area

    def add_crop(self, crop: CropSummary) -> None:
        self.crops[crop.uid] = crop

    def add_material(self, material: MaterialSummary) -> None:
        self.materials[material.uid] = material


class InMemoryTaskQueryService:
    """TaskQueryService 的内存实现"""

    def __init__(self, registry: AssetRegistry | None = None) -> None:
        self.registry = registry or AssetRegistry()

    def find_area_by_id(self, uid: str) -> ResultChannel:
        return ResultChannel.resolved(self.registry.areas.get(uid))

    def find_crop_by_id(self, uid: str) -> ResultChannel:
        return ResultChannel.resolved(self.registry.crops.get(uid))

    def find_material_by_id(self, uid: str) -> ResultChannel:
        return ResultChannel.resolved(self.registry.materials.get(uid))
