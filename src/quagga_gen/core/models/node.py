"""节点与协议配置存储"""
from __future__ import annotations

from typing import Dict, Iterator, List, Type, Union

from .protocols import (
    ZebraConfig, OspfConfig, Ospf6Config, BgpConfig, RipConfig, RipngConfig,
)
from ..types import ProtocolKind

ProtocolConfig = Union[ZebraConfig, OspfConfig, Ospf6Config, BgpConfig, RipConfig, RipngConfig]

# 协议种类 -> 配置记录类型
RECORD_TYPES: Dict[ProtocolKind, Type[ProtocolConfig]] = {
    ProtocolKind.ZEBRA: ZebraConfig,
    ProtocolKind.OSPF: OspfConfig,
    ProtocolKind.OSPF6: Ospf6Config,
    ProtocolKind.BGP: BgpConfig,
    ProtocolKind.RIP: RipConfig,
    ProtocolKind.RIPNG: RipngConfig,
}


class ProtocolConfigStore:
    """单个节点的协议配置存储

    每种协议至多一条记录，首次引用时按节点ID创建，生命周期与节点一致。
    """

    def __init__(self, node_id: int):
        self.node_id = node_id
        self._records: Dict[ProtocolKind, ProtocolConfig] = {}

    def get_or_create(self, kind: ProtocolKind) -> ProtocolConfig:
        """获取记录，不存在时创建零值记录并挂到节点上"""
        kind = ProtocolKind(kind)
        record = self._records.get(kind)
        if record is None:
            record = RECORD_TYPES[kind].for_node(self.node_id)
            self._records[kind] = record
        return record

    def get(self, kind: ProtocolKind):
        """获取已有记录，不存在时返回 None"""
        return self._records.get(ProtocolKind(kind))

    def __getitem__(self, kind: ProtocolKind) -> ProtocolConfig:
        return self._records[ProtocolKind(kind)]

    def __contains__(self, kind: ProtocolKind) -> bool:
        return ProtocolKind(kind) in self._records

    def __iter__(self) -> Iterator[ProtocolKind]:
        # 按协议枚举顺序迭代，与创建顺序无关
        return (kind for kind in ProtocolKind if kind in self._records)

    def __len__(self) -> int:
        return len(self._records)

    def kinds(self) -> List[ProtocolKind]:
        return list(self)

    # 类型化的便捷访问
    @property
    def zebra(self) -> ZebraConfig:
        return self.get_or_create(ProtocolKind.ZEBRA)

    @property
    def ospf(self) -> OspfConfig:
        return self.get_or_create(ProtocolKind.OSPF)

    @property
    def ospf6(self) -> Ospf6Config:
        return self.get_or_create(ProtocolKind.OSPF6)

    @property
    def bgp(self) -> BgpConfig:
        return self.get_or_create(ProtocolKind.BGP)

    @property
    def rip(self) -> RipConfig:
        return self.get_or_create(ProtocolKind.RIP)

    @property
    def ripng(self) -> RipngConfig:
        return self.get_or_create(ProtocolKind.RIPNG)


class Node:
    """网格节点：ID、逻辑位置及其协议配置"""

    def __init__(self, node_id: int, cols: int):
        if node_id < 0 or cols <= 0:
            raise ValueError(f"无效的节点: id={node_id}, cols={cols}")
        self.id = node_id
        self.row, self.col = divmod(node_id, cols)
        self.configs = ProtocolConfigStore(node_id)

    @property
    def name(self) -> str:
        return f"node{self.id}"

    def get_or_create(self, kind: ProtocolKind) -> ProtocolConfig:
        return self.configs.get_or_create(kind)

    def __repr__(self) -> str:
        return f"Node(id={self.id}, row={self.row}, col={self.col}, protocols={[k.value for k in self.configs]})"
