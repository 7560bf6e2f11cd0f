"""
Immutable алгебраические числа: комплексные числа и дроби.

Все типы — frozen Pydantic модели; любая операция возвращает новый экземпляр.
"""
