"""
tools - Профилирование генератора
"""
