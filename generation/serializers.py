"""
Generation app serializers

Input serializers for the generation endpoints and the CoverLetter model.
"""
from rest_framework import serializers

from .models import CoverLetter
from .services import DEFAULT_ROLE, JOB_ROLES


class ResumeSourceSerializer(serializers.Serializer):
    """
    Resume input shared by every generation request.

    Either paste the text or name a stored resume to read it from.
    """

    resume_text = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    resume_name = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        if not (attrs.get('resume_text') or '').strip() and not attrs.get('resume_name'):
            raise serializers.ValidationError(
                'Provide either resume_text or the resume_name of an uploaded resume.'
            )
        return attrs


class ImproveForRoleSerializer(ResumeSourceSerializer):
    role = serializers.ChoiceField(choices=JOB_ROLES, default=DEFAULT_ROLE)


class ImproveForJobSerializer(ResumeSourceSerializer):
    job_description = serializers.CharField()


class CoverLetterRequestSerializer(ResumeSourceSerializer):
    """
    All three job details are required, as is a resume.
    """

    job_title = serializers.CharField()
    company_name = serializers.CharField()
    job_description = serializers.CharField()


class ExportSerializer(serializers.Serializer):
    content = serializers.CharField(trim_whitespace=False)
    filename = serializers.CharField(required=False, allow_blank=True, default='resume')


class CoverLetterSerializer(serializers.ModelSerializer):
    """
    Serializer for CoverLetter. Letters are created by generation only.
    """

    class Meta:
        model = CoverLetter
        fields = [
            'id',
            'user',
            'job_title',
            'company_name',
            'job_description',
            'resume_id',
            'content',
            'created_at',
        ]
        read_only_fields = fields
