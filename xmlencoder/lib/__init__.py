"""
Library modules used by `xmlencoder.escaper.TextEscaper`: the configuration flags, the
character reference tables, and the environment and logging configuration.
"""
