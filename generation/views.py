"""
Generation app views

Endpoints that send resume text to Gemini and a ViewSet over stored
cover letters.
"""
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import mixins, status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsAdminOrOwner
from resumes.extraction import ResumeExtractionError
from resumes.services import ResumeStorageService

from .export import text_attachment
from .models import CoverLetter
from .serializers import (
    CoverLetterRequestSerializer,
    CoverLetterSerializer,
    ExportSerializer,
    ImproveForJobSerializer,
    ImproveForRoleSerializer,
)
from .services import GeminiService, GenerationError

logger = logging.getLogger(__name__)


class ResumeSourceError(Exception):
    """
    Raised when the requested resume cannot be read.
    """

    def __init__(self, response: Response):
        super().__init__(response.data)
        self.response = response


class GenerationAPIView(APIView):
    """
    Shared plumbing: resolve the resume text and build the service.
    """

    permission_classes = [IsAuthenticated]
    serializer_class = None

    def get_service(self) -> GeminiService:
        return GeminiService()

    def resolve_resume(self, request, data):
        """
        Return (resume_text, resume_name) for a validated request.

        Pasted text wins over a stored resume.
        """
        resume_name = data.get('resume_name') or ''
        resume_text = data.get('resume_text') or ''
        if resume_text.strip():
            return resume_text, resume_name or 'resume'

        try:
            return ResumeStorageService().read_text(request.user, resume_name), resume_name
        except FileNotFoundError:
            raise ResumeSourceError(
                Response({'error': 'Resume not found.'}, status=status.HTTP_404_NOT_FOUND)
            )
        except ResumeExtractionError as e:
            raise ResumeSourceError(
                Response({'errors': [str(e)]}, status=status.HTTP_400_BAD_REQUEST)
            )
        except Exception:  # noqa: BLE001
            logger.exception("Failed to read resume %s for user %s", resume_name, request.user.pk)
            raise ResumeSourceError(
                Response(
                    {'error': 'Could not read your resume.'},
                    status=status.HTTP_500_INTERNAL_SERVER_ERROR,
                )
            )

    def post(self, request, *args, **kwargs):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            service = self.get_service()
        except GenerationError as e:
            logger.error("Generation unavailable: %s", e)
            return Response(
                {'error': 'AI generation is not configured.'},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        try:
            resume_text, resume_name = self.resolve_resume(request, data)
        except ResumeSourceError as e:
            return e.response

        try:
            return self.generate(request, service, data, resume_text, resume_name)
        except DjangoValidationError as e:
            return Response({'errors': e.messages}, status=status.HTTP_400_BAD_REQUEST)

    def generate(self, request, service, data, resume_text, resume_name):
        raise NotImplementedError


class ImproveForRoleView(GenerationAPIView):
    """
    POST /api/generation/improve-for-role/

    Body: resume_text or resume_name, role.
    """

    serializer_class = ImproveForRoleSerializer

    def generate(self, request, service, data, resume_text, resume_name):
        content = service.improve_for_role(resume_text, data['role'])
        return Response({'role': data['role'], 'content': content})


class ImproveForJobView(GenerationAPIView):
    """
    POST /api/generation/improve-for-job/

    Body: resume_text or resume_name, job_description. A successful rewrite
    is also saved as a resume version.
    """

    serializer_class = ImproveForJobSerializer

    def generate(self, request, service, data, resume_text, resume_name):
        content = service.improve_for_job(
            request.user,
            resume_text,
            data['job_description'],
            resume_name,
        )
        return Response({'filename': resume_name, 'content': content})


class CoverLetterGenerateView(GenerationAPIView):
    """
    POST /api/generation/cover-letter/

    Body: resume_text or resume_name, job_title, company_name,
    job_description. A successful letter is saved.
    """

    serializer_class = CoverLetterRequestSerializer

    def generate(self, request, service, data, resume_text, resume_name):
        content = service.generate_cover_letter(
            request.user,
            resume_text,
            resume_name,
            data['job_title'],
            data['company_name'],
            data['job_description'],
        )
        return Response({'content': content})


class ExportView(APIView):
    """
    POST /api/generation/export/

    Download generated text as "<base>-improved.txt".
    """

    permission_classes = [IsAuthenticated]

    def post(self, request, *args, **kwargs):
        serializer = ExportSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return text_attachment(
            serializer.validated_data['content'],
            serializer.validated_data.get('filename') or 'resume',
        )


class CoverLetterViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for CoverLetter.

    - GET: List current user's cover letters
    - GET {id}: Retrieve a cover letter
    - DELETE {id}: Delete a cover letter
    """

    serializer_class = CoverLetterSerializer
    permission_classes = [IsAuthenticated, IsAdminOrOwner]

    def get_queryset(self):
        """
        Filter to show only current user's cover letters.
        Admins can see all cover letters.
        """
        if self.request.user.role == 'ADMIN':
            return CoverLetter.objects.all()
        return CoverLetter.objects.filter(user=self.request.user)
