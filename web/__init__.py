"""
web - Flask-сервис поиска по таблице углов
"""
