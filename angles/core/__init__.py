"""
Core: доменная модель угла, математические примитивы и текстовый формат.

Модули не зависят от внешних систем: только чистые вычисления над float.
"""
