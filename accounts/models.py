"""
Accounts app models

Custom User model extending AbstractUser with role-based access.
"""
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Custom user model with a role.

    Admins can read every user's records through the API; job seekers only
    see their own.
    """

    ADMIN = 'ADMIN'
    JOB_SEEKER = 'JOB_SEEKER'

    ROLE_CHOICES = [
        (ADMIN, 'Admin'),
        (JOB_SEEKER, 'Job Seeker'),
    ]

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=JOB_SEEKER,
    )

    def __str__(self):
        return f"{self.username} ({self.role})"

    @property
    def is_admin_role(self) -> bool:
        return self.role == self.ADMIN

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'
