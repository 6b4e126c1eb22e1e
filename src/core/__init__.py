"""
Core domain models, mathematical primitives, and contracts.

Чистый движок без ввода-вывода и разделяемого состояния: все операции являются
детерминированные функции канонических значений.
"""
