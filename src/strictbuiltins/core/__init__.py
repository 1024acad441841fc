"""
Core numeric, text, sequence and iteration primitives.

Все модули поднимают ошибки из общей таксономии core.errors.
"""
