"""异常定义"""


class TopologyInvariantError(ValueError):
    """拓扑构造不变量被破坏（切分参数与网格尺寸不一致等），属于场景编写错误"""


class AreaAdjacencyError(TopologyInvariantError):
    """两个不同的非零区域直接相邻"""

    def __init__(self, node_a: int, area_a: int, node_b: int, area_b: int):
        self.node_a = node_a
        self.node_b = node_b
        self.area_a = area_a
        self.area_b = area_b
        super().__init__(
            f"节点 {node_a}(区域 {area_a}) 与节点 {node_b}(区域 {area_b}) 属于不同区域却直接相邻"
        )


class AddressSpaceError(ValueError):
    """链路ID或区域号超出地址分配器的无冲突范围"""
