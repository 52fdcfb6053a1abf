"""
核心类型定义模块
协议种类、边分类、地址方案以及 Success/Failure 结果类型
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union, Annotated
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict, computed_field


# 基础 Pydantic 配置
class BaseTypeModel(BaseModel):
    """基础类型模型配置"""
    model_config = ConfigDict(
        frozen=True,  # 不可变
        extra='forbid',  # 禁止额外字段
        validate_assignment=True,  # 赋值时验证
        use_enum_values=False,
        str_strip_whitespace=True,  # 去除空白字符
        arbitrary_types_allowed=True,  # 允许任意类型
    )


# 基础类型定义
NodeId = Annotated[int, Field(ge=0, description="节点ID")]
LinkId = Annotated[int, Field(ge=0, description="链路ID")]
AreaNumber = Annotated[int, Field(ge=0, le=255, description="OSPF区域号")]
ASNumber = Annotated[int, Field(ge=1, le=4294967295, description="BGP AS号")]
RouterID = Annotated[str, Field(pattern=r'^\d+\.\d+\.\d+\.\d+$', description="路由器ID")]
InterfaceName = Annotated[str, Field(min_length=1, max_length=32, pattern=r'^[a-zA-Z0-9_.-]+$')]


# 协议种类
class ProtocolKind(str, Enum):
    """协议种类枚举，每种对应一个守护进程和一个配置文件"""
    ZEBRA = "zebra"
    OSPF = "ospf"
    OSPF6 = "ospf6"
    BGP = "bgp"
    RIP = "rip"
    RIPNG = "ripng"

    @property
    def daemon(self) -> str:
        """守护进程二进制名称"""
        daemons = {
            ProtocolKind.ZEBRA: "zebra",
            ProtocolKind.OSPF: "ospfd",
            ProtocolKind.OSPF6: "ospf6d",
            ProtocolKind.BGP: "bgpd",
            ProtocolKind.RIP: "ripd",
            ProtocolKind.RIPNG: "ripngd",
        }
        return daemons[self]

    @property
    def filename(self) -> str:
        """配置文件名"""
        return f"{self.daemon}.conf"

    @property
    def pid_filename(self) -> str:
        """pid 文件名"""
        return f"{self.daemon}.pid"

    @classmethod
    def parse(cls, value: str) -> 'ProtocolKind':
        """从协议名或守护进程名解析（如 ospf / ospfd / ospfd.conf）"""
        name = value.strip().lower()
        if name.endswith(".conf"):
            name = name[: -len(".conf")]
        for kind in cls:
            if name in (kind.value, kind.daemon):
                return kind
        raise ValueError(f"未知的协议: {value}")


# 边分类
class EdgeClass(str, Enum):
    """边分类枚举"""
    INTRA = "intra"
    INTER = "inter"
    BORDER = "border"

    @property
    def description(self) -> str:
        """获取边分类描述"""
        descriptions = {
            EdgeClass.INTRA: "区域内链路 - 两端位于同一叶子区域",
            EdgeClass.INTER: "骨干链路 - 两端均为骨干节点",
            EdgeClass.BORDER: "边界链路 - 叶子区域节点与骨干节点相连",
        }
        return descriptions[self]


# 地址方案
class AddressScheme(str, Enum):
    """地址分配方案"""
    AREA = "area"  # 10.<area>.x.y/30，按区域分段
    FLAT = "flat"  # 10.x.y.z/30，统一平面编址


# 结果类型
class Success(BaseTypeModel):
    """成功结果模型，支持位置参数和关键字参数"""
    value: Any = Field(description="成功返回的值")
    message: Optional[str] = Field(default=None, description="成功消息")

    def __init__(self, *args, **kwargs):
        if len(args) == 1 and not kwargs:
            super().__init__(value=args[0])
        elif len(args) == 2 and not kwargs:
            super().__init__(value=args[0], message=args[1])
        elif len(args) == 0:
            super().__init__(**kwargs)
        else:
            raise TypeError(f"Invalid arguments for Success: args={args}, kwargs={kwargs}")

    @computed_field
    @property
    def is_success(self) -> bool:
        return True


class Failure(BaseTypeModel):
    """失败结果模型，支持位置参数和关键字参数"""
    error: str = Field(description="错误信息")
    error_code: Optional[str] = Field(default=None, description="错误代码")
    details: Optional[Dict[str, Any]] = Field(default=None, description="错误详情")

    def __init__(self, *args, **kwargs):
        if len(args) == 1 and not kwargs:
            super().__init__(error=args[0])
        elif len(args) == 2 and not kwargs:
            super().__init__(error=args[0], error_code=args[1])
        elif len(args) == 0:
            super().__init__(**kwargs)
        else:
            raise TypeError(f"Invalid arguments for Failure: args={args}, kwargs={kwargs}")

    @computed_field
    @property
    def is_success(self) -> bool:
        return False

    @classmethod
    def from_exception(cls, exc: Exception, error_code: Optional[str] = None) -> 'Failure':
        """从异常创建失败结果"""
        return cls(
            error=str(exc),
            error_code=error_code or exc.__class__.__name__,
            details={"exception_type": exc.__class__.__name__}
        )


Result = Union[Success, Failure]
