"""
Applications app views

ViewSet for Application tracking.
"""
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import mixins, serializers, viewsets
from rest_framework.permissions import IsAuthenticated

from accounts.permissions import IsAdminOrOwner

from .models import Application
from .serializers import ApplicationSerializer
from .services import ApplicationService


class ApplicationViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for Application.

    - POST: Create application (status defaults to Applied)
    - GET: List current user's applications, ?status= filters by status
    - GET {id}: Retrieve specific application
    - PUT/PATCH {id}: Update any field, including status

    Applications cannot be deleted.
    """

    serializer_class = ApplicationSerializer
    permission_classes = [IsAuthenticated, IsAdminOrOwner]

    def get_queryset(self):
        """
        Filter to show only current user's applications.
        Admins can see all applications.
        """
        if self.request.user.role == 'ADMIN':
            queryset = Application.objects.all()
        else:
            queryset = Application.objects.filter(user=self.request.user)

        status_filter = self.request.query_params.get('status')
        if status_filter:
            if status_filter not in Application.Status.values:
                raise serializers.ValidationError(
                    {'status': f"Must be one of: {', '.join(Application.Status.values)}"}
                )
            queryset = queryset.filter(status=status_filter)

        return queryset.select_related('resume').order_by('-applied_date', '-created_at')

    def perform_create(self, serializer):
        try:
            serializer.instance = ApplicationService.create_application(
                self.request.user,
                **serializer.validated_data,
            )
        except DjangoValidationError as e:
            raise serializers.ValidationError({'errors': e.messages})

    def perform_update(self, serializer):
        try:
            serializer.instance = ApplicationService.update_application(
                serializer.instance,
                **serializer.validated_data,
            )
        except DjangoValidationError as e:
            raise serializers.ValidationError({'errors': e.messages})
