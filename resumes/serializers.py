"""
Resumes app serializers

Serializers for uploaded resume files and ResumeVersion rows.
"""
from rest_framework import serializers
from .models import ResumeVersion


class ResumeFileSerializer(serializers.Serializer):
    """
    Read-only view of a stored resume file.
    """

    name = serializers.CharField()
    url = serializers.CharField()
    uploaded_at = serializers.DateTimeField()
    size = serializers.IntegerField(allow_null=True)


class ResumeUploadSerializer(serializers.Serializer):
    """
    Multipart upload payload. Type and size checks happen in the service.
    """

    file = serializers.FileField(allow_empty_file=False)


class ResumeVersionSerializer(serializers.ModelSerializer):
    """
    Serializer for ResumeVersion.

    Versions are produced by the generation endpoints, so every field is
    read-only here.
    """

    class Meta:
        model = ResumeVersion
        fields = [
            'id',
            'user',
            'resume_id',
            'original_filename',
            'job_description',
            'tweaked_text',
            'is_default',
            'created_at',
        ]
        read_only_fields = fields
