"""
Resume Service Layer

Handles validation and storage of uploaded resume files, plus bookkeeping
for AI-tweaked resume versions.
"""
import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.files.storage import storages
from django.db import transaction

from .extraction import extract_text, file_extension
from .models import ResumeVersion

logger = logging.getLogger(__name__)


@dataclass
class ResumeFile:
    """
    A stored resume file as shown to the user.
    """

    name: str
    url: str
    uploaded_at: datetime
    size: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'url': self.url,
            'uploaded_at': self.uploaded_at.isoformat() if self.uploaded_at else None,
            'size': self.size,
        }


class ResumeStorageService:
    """Service for per-user resume files kept in object storage."""

    def __init__(self, storage=None):
        """
        Args:
            storage: Django storage backend. Defaults to the "resumes" alias
                configured in ``settings.STORAGES``.
        """
        self.storage = storage if storage is not None else storages['resumes']

    @property
    def allowed_extensions(self) -> tuple:
        return tuple(getattr(settings, 'RESUME_ALLOWED_EXTENSIONS', ('pdf', 'docx')))

    @property
    def max_upload_size(self) -> int:
        return int(getattr(settings, 'RESUME_MAX_UPLOAD_SIZE', 5 * 1024 * 1024))

    @staticmethod
    def user_prefix(user) -> str:
        return str(user.pk)

    def path_for(self, user, filename: str) -> str:
        return f"{self.user_prefix(user)}/{os.path.basename(filename)}"

    def validate_upload(self, file) -> None:
        """
        Check extension and size of an uploaded file.

        Raises:
            ValidationError: Unsupported type or file over the size limit.
        """
        extension = file_extension(os.path.basename(file.name or ''))
        if extension not in self.allowed_extensions:
            raise ValidationError("File type not supported. Please upload a PDF or DOCX file.")

        if file.size > self.max_upload_size:
            limit_mb = self.max_upload_size // (1024 * 1024)
            raise ValidationError(f"File is too large. Maximum size is {limit_mb}MB.")

    def upload(self, file, user) -> ResumeFile:
        """
        Store a resume under the user's folder, replacing any file of the
        same name.

        Args:
            file: Django ``File``/``UploadedFile``
            user: Owner of the upload

        Returns:
            The stored ResumeFile

        Raises:
            ValidationError: If the file fails validation
        """
        self.validate_upload(file)

        path = self.path_for(user, file.name)
        if self.storage.exists(path):
            self.storage.delete(path)
        stored_path = self.storage.save(path, file)

        logger.info("Stored resume %s for user %s", stored_path, user.pk)
        return self._describe(stored_path)

    def list(self, user) -> List[ResumeFile]:
        """
        All resumes for a user with an allowed extension, newest first.
        """
        prefix = self.user_prefix(user)
        try:
            _, filenames = self.storage.listdir(prefix)
        except FileNotFoundError:
            return []

        resumes = [
            self._describe(f"{prefix}/{name}")
            for name in filenames
            if file_extension(name) in self.allowed_extensions
        ]
        return sorted(resumes, key=lambda resume: resume.uploaded_at, reverse=True)

    def current(self, user) -> Optional[ResumeFile]:
        """The most recently uploaded resume, if any."""
        resumes = self.list(user)
        return resumes[0] if resumes else None

    def delete(self, user, filename: str) -> bool:
        """
        Remove a stored resume.

        Returns:
            True if deleted, False if not found
        """
        path = self.path_for(user, filename)
        if not self.storage.exists(path):
            return False
        self.storage.delete(path)
        logger.info("Deleted resume %s for user %s", path, user.pk)
        return True

    def read_text(self, user, filename: str) -> str:
        """
        Extract plain text from a stored resume.

        Raises:
            FileNotFoundError: No such resume for this user
            ResumeExtractionError: The file yielded no text
        """
        path = self.path_for(user, filename)
        if not self.storage.exists(path):
            raise FileNotFoundError(path)
        with self.storage.open(path, 'rb') as fh:
            content = fh.read()
        return extract_text(content, filename)

    def _describe(self, path: str) -> ResumeFile:
        try:
            size = self.storage.size(path)
        except NotImplementedError:
            size = None
        return ResumeFile(
            name=os.path.basename(path),
            url=self.storage.url(path),
            uploaded_at=self._created_time(path),
            size=size,
        )

    def _created_time(self, path: str) -> datetime:
        try:
            return self.storage.get_created_time(path)
        except NotImplementedError:
            return self.storage.get_modified_time(path)


class ResumeVersionService:
    """Service for the ledger of AI-tweaked resume versions."""

    @staticmethod
    def create(
        user,
        resume_id: str,
        original_filename: str,
        tweaked_text: str,
        job_description: Optional[str] = None,
    ) -> ResumeVersion:
        """
        Record a new tweaked version. New versions are never the default.
        """
        version = ResumeVersion.objects.create(
            user=user,
            resume_id=resume_id,
            original_filename=original_filename,
            job_description=job_description or None,
            tweaked_text=tweaked_text,
        )
        logger.info("Recorded resume version %s for user %s", version.pk, user.pk)
        return version

    @staticmethod
    def set_default(version_id: int, user) -> ResumeVersion:
        """
        Make one version the user's default.

        The other versions are cleared first, then the target is flagged.
        Both writes share a transaction, so a failure in the second write
        leaves the previous default in place.

        Raises:
            ResumeVersion.DoesNotExist: Unknown id or another user's version
        """
        with transaction.atomic():
            version = ResumeVersion.objects.select_for_update().get(pk=version_id, user=user)
            ResumeVersion.objects.filter(user=user, is_default=True).exclude(
                pk=version.pk
            ).update(is_default=False)
            if not version.is_default:
                version.is_default = True
                version.save(update_fields=['is_default'])
        return version

    @staticmethod
    def list(user) -> List[ResumeVersion]:
        return list(ResumeVersion.objects.filter(user=user).order_by('-created_at', '-id'))

    @staticmethod
    def default_for(user) -> Optional[ResumeVersion]:
        return ResumeVersion.objects.filter(user=user, is_default=True).first()

    @staticmethod
    def delete(version_id: int, user) -> bool:
        """
        Delete a version.

        Returns:
            True if deleted, False if not found
        """
        deleted, _ = ResumeVersion.objects.filter(pk=version_id, user=user).delete()
        return deleted > 0
