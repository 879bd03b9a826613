"""
Resumes app models

ResumeVersion model for storing AI-tweaked variants of an uploaded resume.
The uploaded files themselves live in object storage, not in a table.
"""
from django.conf import settings
from django.db import models
from django.db.models import Q


class ResumeVersion(models.Model):
    """
    One AI-generated rewrite of a resume.

    A version is optionally tied to the job description it was tailored for.
    At most one version per user carries ``is_default``.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='resume_versions',
    )
    # Filename of the stored resume the rewrite was produced from
    resume_id = models.CharField(max_length=255)
    original_filename = models.CharField(max_length=255)
    job_description = models.TextField(null=True, blank=True)
    tweaked_text = models.TextField()
    is_default = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        suffix = " (default)" if self.is_default else ""
        return f"{self.original_filename} version {self.pk}{suffix}"

    class Meta:
        verbose_name = 'Resume Version'
        verbose_name_plural = 'Resume Versions'
        ordering = ['-created_at', '-id']
        constraints = [
            models.UniqueConstraint(
                fields=['user'],
                condition=Q(is_default=True),
                name='unique_default_resume_version_per_user',
            ),
        ]
