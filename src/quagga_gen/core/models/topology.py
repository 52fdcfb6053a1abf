"""拓扑、链路与生成结果模块"""
from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import Field, computed_field

from .base import BaseConfig
from .node import Node
from .tiling import AreaTiling
from ..types import AddressScheme, EdgeClass, NodeId, LinkId, AreaNumber


class Edge(BaseConfig):
    """网格边

    link_id 在各自分类内按创建顺序递增；sequence 为全局创建序号。
    Border 边总是把叶子区域一端放在 node_a。
    """

    node_a: NodeId = Field(description="端点A")
    node_b: NodeId = Field(description="端点B")
    edge_class: EdgeClass = Field(description="边分类")
    link_id: LinkId = Field(description="分类内链路ID")
    sequence: int = Field(ge=0, description="全局创建序号")
    ifindex_a: int = Field(ge=0, description="端点A的接口编号")
    ifindex_b: int = Field(ge=0, description="端点B的接口编号")

    @computed_field
    @property
    def ifname_a(self) -> str:
        return f"sim{self.ifindex_a}"

    @computed_field
    @property
    def ifname_b(self) -> str:
        return f"sim{self.ifindex_b}"

    @property
    def endpoints(self) -> Tuple[int, int]:
        return self.node_a, self.node_b

    def other(self, node_id: int) -> int:
        """获取链路另一端"""
        if node_id == self.node_a:
            return self.node_b
        if node_id == self.node_b:
            return self.node_a
        raise ValueError(f"节点 {node_id} 不在此链路上")


@dataclass
class GridTopology:
    """网格构建结果：节点集合与按创建顺序分桶的边"""

    rows: int
    cols: int
    tiling: AreaTiling
    nodes: List[Node]
    intra_edges: List[Edge] = field(default_factory=list)
    inter_edges: List[Edge] = field(default_factory=list)
    border_edges: List[Edge] = field(default_factory=list)

    def bucket(self, edge_class: EdgeClass) -> List[Edge]:
        buckets = {
            EdgeClass.INTRA: self.intra_edges,
            EdgeClass.INTER: self.inter_edges,
            EdgeClass.BORDER: self.border_edges,
        }
        return buckets[EdgeClass(edge_class)]

    @property
    def edges(self) -> List[Edge]:
        """全部边，按全局创建顺序"""
        return sorted(
            self.intra_edges + self.inter_edges + self.border_edges,
            key=lambda e: e.sequence,
        )

    @property
    def edge_counts(self) -> Dict[EdgeClass, int]:
        return {cls: len(self.bucket(cls)) for cls in EdgeClass}

    @property
    def total_edges(self) -> int:
        return len(self.intra_edges) + len(self.inter_edges) + len(self.border_edges)

    def node(self, node_id: int) -> Node:
        return self.nodes[node_id]


class LinkAssignment(BaseConfig):
    """单条链路的地址分配"""

    edge: Edge = Field(description="链路")
    scheme: AddressScheme = Field(description="地址方案")
    area: Optional[AreaNumber] = Field(default=None, description="地址所属区域（flat 方案为空）")
    address_key: int = Field(ge=0, description="地址分配使用的链路键")
    address_a: str = Field(description="端点A地址(CIDR)")
    address_b: str = Field(description="端点B地址(CIDR)")

    @computed_field
    @property
    def network(self) -> str:
        """/30 网段"""
        return str(ipaddress.ip_interface(self.address_a).network)

    def address_of(self, node_id: int) -> str:
        if node_id == self.edge.node_a:
            return self.address_a
        if node_id == self.edge.node_b:
            return self.address_b
        raise ValueError(f"节点 {node_id} 不在此链路上")

    def ifname_of(self, node_id: int) -> str:
        if node_id == self.edge.node_a:
            return self.edge.ifname_a
        if node_id == self.edge.node_b:
            return self.edge.ifname_b
        raise ValueError(f"节点 {node_id} 不在此链路上")


class DaemonCommand(BaseConfig):
    """外部进程层启动守护进程所需的参数"""

    node_id: NodeId = Field(description="节点ID")
    binary: str = Field(description="守护进程二进制")
    args: List[str] = Field(description="命令行参数")
    start_time: float = Field(ge=0, description="启动时间(秒)")
    config_path: Path = Field(description="宿主机上的配置文件路径")


class GenerationResult(BaseConfig):
    """生成结果"""
    success: bool = Field(description="是否成功")
    message: str = Field(description="结果消息")
    output_dir: Optional[Path] = Field(default=None, description="输出目录")
    error_details: Optional[str] = Field(default=None, description="错误详情")
    stats: Optional[Dict[str, Any]] = Field(default=None, description="生成统计信息")
