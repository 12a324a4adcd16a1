# src/smart_hub/utils/exceptions.py

class SmartHubError(Exception):
    """Base exception class for the smart hub"""
    pass

class ConfigurationError(SmartHubError):
    """Raised when there are issues with configuration"""
    pass

class InitializationError(SmartHubError):
    """Raised when component initialization fails"""
    pass

class DeviceError(SmartHubError):
    """Raised when there are issues with device operations"""
    pass

class UnknownDeviceKind(DeviceError):
    """Raised when the factory is asked for a device type it does not know"""
    pass

class DeviceNotFound(DeviceError):
    """Raised when a command references a device id that is not registered"""
    pass

class Unauthorized(DeviceError):
    """Raised when an access token may not control the wrapped device"""
    pass

class InvalidCommand(DeviceError):
    """Raised when a command name or its arguments do not fit the device"""
    pass

class ScheduleError(SmartHubError):
    """Raised when a schedule entry cannot be created"""
    pass
