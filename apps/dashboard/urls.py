from django.urls import path
from . import views

app_name = 'dashboard'

urlpatterns = [
    path('stats/', views.stats, name='stats'),
    path('activity/', views.activity, name='activity'),
    path('sales-chart/', views.sales_chart, name='sales-chart'),
    path('report/', views.report, name='report'),
]
