"""
Generation app models

CoverLetter model for storing generated cover letters.
"""
from django.conf import settings
from django.db import models


class CoverLetter(models.Model):
    """
    A cover letter generated for one job from one of the user's resumes.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='cover_letters',
    )
    job_title = models.CharField(max_length=255)
    company_name = models.CharField(max_length=255)
    job_description = models.TextField()
    # Filename of the stored resume the letter was written from
    resume_id = models.CharField(max_length=255)
    content = models.TextField()

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"Cover letter for {self.job_title} at {self.company_name}"

    class Meta:
        verbose_name = 'Cover Letter'
        verbose_name_plural = 'Cover Letters'
        ordering = ['-created_at', '-id']
