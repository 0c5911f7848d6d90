from django.urls import path

from . import views

app_name = 'products'

urlpatterns = [
    path('Products', views.index, name='index'),
    path('Products/Index', views.index),
    path('Products/Details', views.details),
    path('Products/Details/<int:id>', views.details, name='details'),
    path('Products/Create', views.create, name='create'),
    path('Products/Edit', views.edit),
    path('Products/Edit/<int:id>', views.edit, name='edit'),
    path('Products/Delete', views.delete),
    path('Products/Delete/<int:id>', views.delete, name='delete'),
]

"""
Available pages:

- GET       /Products                  - Product list
- GET       /Products/Details/{id}     - Product details
- GET/POST  /Products/Create           - Create form / submit
- GET/POST  /Products/Edit/{id}        - Edit form / submit
- GET/POST  /Products/Delete/{id}      - Delete confirmation / submit

A missing {id} answers 404, like an unknown one.
"""
