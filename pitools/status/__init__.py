"""status module: hardware and system status of the board.

Text reporters return CommandResult, remote lookups return (value, error).
"""
from .services.local import board_model, detect_platform, ip_addresses, memory_usage
from .services.remote import GeoInfo, external_ip_address, geo_location
from .services.text import cpu_info, free_memory, free_spaces, hostname, memory_split, uname, uptime
from .services.values import cpu_frequency, cpu_temperature, cpu_throttled, decode_throttled, extract_value

__all__ = [
    "board_model",
    "cpu_frequency",
    "cpu_info",
    "cpu_temperature",
    "cpu_throttled",
    "decode_throttled",
    "detect_platform",
    "external_ip_address",
    "extract_value",
    "free_memory",
    "free_spaces",
    "geo_location",
    "GeoInfo",
    "hostname",
    "ip_addresses",
    "memory_split",
    "memory_usage",
    "uname",
    "uptime",
]
