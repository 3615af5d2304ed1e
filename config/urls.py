"""
URL configuration for the back office project.
"""

from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.views.generic import RedirectView

urlpatterns = [
    path('admin/', admin.site.urls),

    # App URLs
    path('', include('apps.accounts.urls', namespace='accounts')),
    path('reports/', include('apps.reports.urls', namespace='reports')),
    path('', RedirectView.as_view(pattern_name='reports:overdue_report', permanent=False)),
]

if settings.DEBUG and 'debug_toolbar' in settings.INSTALLED_APPS:
    import debug_toolbar
    urlpatterns = [
        path('__debug__/', include(debug_toolbar.urls)),
    ] + urlpatterns

# Admin site customization
admin.site.site_header = 'Back Office Administration'
admin.site.site_title = 'Back Office Admin'
admin.site.index_title = 'Works, customers and staff'
