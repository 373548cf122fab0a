"""
Service Providers
"""
from zancommon.providers.common_service_provider import CommonServiceProvider

__all__ = ['CommonServiceProvider']
