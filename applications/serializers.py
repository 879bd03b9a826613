"""
Applications app serializers

Serializers for Application model.
"""
from rest_framework import serializers

from generation.models import CoverLetter
from resumes.models import ResumeVersion

from .models import Application


class ApplicationSerializer(serializers.ModelSerializer):
    """
    Serializer for Application.

    job_title and company are required. The linked resume version and
    cover letter must belong to the requesting user.
    """

    resume = serializers.PrimaryKeyRelatedField(
        queryset=ResumeVersion.objects.all(),
        required=False,
        allow_null=True,
    )
    cover_letter = serializers.PrimaryKeyRelatedField(
        queryset=CoverLetter.objects.all(),
        required=False,
        allow_null=True,
    )
    resume_name = serializers.CharField(source='resume.original_filename', read_only=True, default=None)

    class Meta:
        model = Application
        fields = [
            'id',
            'user',
            'job_title',
            'company',
            'applied_date',
            'status',
            'notes',
            'resume',
            'resume_name',
            'cover_letter',
            'follow_up_date',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'user', 'created_at', 'updated_at']
        extra_kwargs = {
            'applied_date': {'required': False},
            'notes': {'required': False, 'allow_blank': True},
        }

    def _owner_id(self):
        # The edited record's owner; the requester for new records
        if self.instance is not None:
            return self.instance.user_id
        request = self.context.get('request')
        return request.user.pk if request is not None else None

    def _check_owner(self, obj):
        owner_id = self._owner_id()
        if obj is not None and owner_id is not None and obj.user_id != owner_id:
            raise serializers.ValidationError('Object belongs to a different user.')
        return obj

    def validate_resume(self, value):
        return self._check_owner(value)

    def validate_cover_letter(self, value):
        return self._check_owner(value)
