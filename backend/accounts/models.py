from django.contrib.auth.models import AbstractUser
from django.db import models


class UserRole(models.TextChoices):
    OPERATOR = 'operator', 'Operator'
    ACCOUNTANT = 'accountant', 'Accountant'
    ADMINISTRATOR = 'administrator', 'Administrator'


class CustomUser(AbstractUser):
    """Staff member of the brokerage. New accounts wait for approval before they can log in."""
    role = models.CharField(max_length=20, choices=UserRole.choices, default=UserRole.OPERATOR)
    phone = models.CharField(max_length=50, blank=True, null=True)
    approved = models.BooleanField(default=False)

    @property
    def can_log_in(self) -> bool:
        return self.is_active and (self.approved or self.is_superuser)

    def __str__(self):
        return f"{self.get_full_name() or self.username} ({self.get_role_display()})"
