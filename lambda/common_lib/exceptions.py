"""
Common exceptions used across the order intake function
"""


class ValidationError(Exception):
    """Order request failed a business rule; reported to the caller as 400"""
    def __init__(self, message, field=None, status_code=400):
        self.message = message
        self.field = field
        self.status_code = status_code
        super().__init__(self.message)


class NotificationError(Exception):
    """Order notification could not be delivered"""
    def __init__(self, message, order_number=None):
        self.message = message
        self.order_number = order_number
        super().__init__(self.message)


class ConfigurationError(Exception):
    """Invalid deployment configuration"""
    def __init__(self, message, setting=None):
        self.message = message
        self.setting = setting
        super().__init__(self.message)
