from shortlinker.services.allocator import CodeAllocator
from shortlinker.services.resolver import RedirectResolver


__all__ = ['CodeAllocator', 'RedirectResolver']
