from django.apps import AppConfig


class EditormdConfig(AppConfig):
    name = 'editormd'
    verbose_name = 'Editor.md KaTeX'
