"""
Math modules для BigFloat

- alignment: выравнивание scale и усекающее деление целых
- rounding: round / truncate / floor / ceiling
- transcendental: exp, log, sqrt, pow, тригонометрия

Публичный API реэкспортируется из пакета bigfloat; здесь модули не
импортируются, чтобы domain мог использовать alignment без цикла.
"""
