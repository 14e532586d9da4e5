"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: schemas.py
@DateTime: 2026-10-19
@Docs: Failure record schemas.
校验失败记录模型。
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class FailureRecord(BaseModel):
    """
    Failure record for one failed check.
    单个校验失败记录。

    Attributes:
        key: Field key.
        key: 字段名。
        val: Offending value.
        val: 未通过校验的值。
        msg: Failure message.
        msg: 失败提示。
    """

    model_config = ConfigDict(frozen=True)

    key: str
    val: Any = None
    msg: str
