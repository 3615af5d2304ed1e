"""
Settings package for the back office project.

Pick a module explicitly through DJANGO_SETTINGS_MODULE:
- config.settings.development (default in manage.py)
- config.settings.production
- config.settings.test (pytest)
"""
