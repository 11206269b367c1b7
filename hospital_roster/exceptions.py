"""Domain errors raised by the service layer."""


class RosterError(Exception):
    """Base class for roster errors."""


class ValidationFailed(RosterError):
    """The request was understood but breaks a business rule (HTTP 400)."""


class DuplicateDutyError(ValidationFailed):
    def __init__(self, staff_id: int, date: str, shift: str):
        super().__init__("该人员在指定日期的该班次已存在排班")
        self.staff_id = staff_id
        self.date = date
        self.shift = shift


class AdminNotFoundError(ValidationFailed):
    def __init__(self, username: str):
        super().__init__("管理员账户不存在")
        self.username = username


class IncorrectPasswordError(ValidationFailed):
    def __init__(self):
        super().__init__("原密码不正确")
