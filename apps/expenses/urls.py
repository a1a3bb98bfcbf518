from django.urls import path, re_path
from . import views

app_name = 'expenses'

urlpatterns = [
    # POST   /api/expenses/              - Record an expense
    path('', views.record_expense, name='expense-record'),

    # GET    /api/expenses/id/{id}/      - Single expense
    path('id/<int:expense_id>/', views.expense_detail, name='expense-detail'),

    # GET    /api/expenses/{YYYY-MM-DD}/ - Expenses on a date
    re_path(r'^(?P<date>\d{4}-\d{2}-\d{2})/$', views.expenses_on_date, name='expenses-on-date'),
]
