from django.db import models


class Expense(models.Model):
    """A single recorded expense."""

    payee = models.CharField(max_length=200)
    amount = models.DecimalField(max_digits=10, decimal_places=2)
    date = models.DateField()

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'expenses'
        indexes = [
            models.Index(fields=['date'], name='expenses_date_idx'),
        ]
        ordering = ['date', 'id']

    def __str__(self):
        return f"{self.payee} - {self.amount} ({self.date})"
