"""
argvfile.utils – Small shared utilities (host environment, canonical names).
"""
from .paths import SystemHostEnvironment, canonical_name, host_is_case_sensitive

__all__ = ["SystemHostEnvironment", "canonical_name", "host_is_case_sensitive"]
