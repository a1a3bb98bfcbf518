from django.contrib import admin
from .models import Expense


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    """Admin interface for Expenses."""

    list_display = ['payee', 'amount', 'date', 'created_at']
    list_filter = ['date']
    search_fields = ['payee']
    readonly_fields = ['created_at']
    date_hierarchy = 'date'
    ordering = ['-date', '-id']
