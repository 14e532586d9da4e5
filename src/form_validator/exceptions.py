"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: exceptions.py
@DateTime: 2026-10-19
@Docs: Form validator error hierarchy.
表单校验异常体系。

Field failures are returned as records, never raised. These errors cover
invalid rule definitions, invalid configuration, and the opt-in ``check`` API.
字段校验失败以记录形式返回，不会抛出。这里的异常仅用于规则定义错误、配置错误
以及可选的 ``check`` 接口。
"""

from typing import Any


class FormValidatorError(Exception):
    """
    Form validator errors.
    表单校验异常。

    Attributes:
        message: Error message.
        message: 错误消息。
        status_code: HTTP status code.
        status_code: HTTP 状态码。
        details: Error details.
        details: 错误详情。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    def __init__(
        self,
        *,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
        error_code: str = "form_validator_error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details
        self.error_code = error_code


class RuleError(FormValidatorError):
    """
    Invalid rule definition.
    规则定义错误。
    """


class ConfigError(FormValidatorError):
    """
    Invalid configuration.
    配置错误。
    """


class ValidationError(FormValidatorError):
    """
    Form data failed validation.
    表单数据校验未通过。
    """

    def __init__(
        self,
        *,
        message: str = "Form validation failed / 表单校验未通过",
        status_code: int = 422,
        details: Any | None = None,
        error_code: str = "validation_failed",
    ) -> None:
        super().__init__(message=message, status_code=status_code, details=details, error_code=error_code)
