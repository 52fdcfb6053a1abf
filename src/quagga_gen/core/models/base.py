"""基础配置类"""
from pydantic import BaseModel, ConfigDict


class BaseConfig(BaseModel):
    """基础配置类 - 不可变配置模型的基类"""

    model_config = ConfigDict(
        frozen=True,  # 不可变
        extra='forbid',  # 禁止额外字段
        validate_assignment=True,  # 赋值时验证
        str_strip_whitespace=True,  # 去除空白字符
    )


class RecordConfig(BaseModel):
    """协议配置记录基类 - 归属于单个节点的可变记录"""

    model_config = ConfigDict(
        frozen=False,
        extra='forbid',
        validate_assignment=True,
        str_strip_whitespace=True,
    )
