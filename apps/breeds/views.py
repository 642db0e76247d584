from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from apps.accounts.permissions import IsFarmOwnerOrReadOnly
from .models import Breed, SourceFarm
from .serializers import (
    BreedSerializer,
    BreedWriteSerializer,
    SourceFarmSerializer,
    SourceFarmDetailSerializer,
)
from .services import (
    create_breed,
    update_breed,
    delete_breed,
    DuplicateBreedError,
    BreedNotFoundError,
    BreedInUseError,
)


class BreedPagination(PageNumberPagination):
    """Pagination for breeds and source farms."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class BreedViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Breed CRUD operations.

    list: Get all breeds (search by name or code)
    create: Create a breed (owners only)
    retrieve: Get a specific breed
    update: Update a breed (owners only)
    destroy: Delete an unused breed (owners only)
    """

    queryset = Breed.objects.prefetch_related('source_farms')
    serializer_class = BreedSerializer
    permission_classes = [IsAuthenticated, IsFarmOwnerOrReadOnly]
    pagination_class = BreedPagination

    def get_queryset(self):
        """Filter breeds by ?search= (name or code)."""
        queryset = super().get_queryset()
        search = self.request.query_params.get('search')
        if search:
            queryset = queryset.filter(name__icontains=search) | queryset.filter(code__icontains=search)
        return queryset

    def get_serializer_class(self):
        """Use different serializers for read and write."""
        if self.action in ['create', 'update', 'partial_update']:
            return BreedWriteSerializer
        return BreedSerializer

    def create(self, request, *args, **kwargs):
        """Create a new breed."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            breed = create_breed(**serializer.validated_data)
        except DuplicateBreedError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(
            BreedSerializer(breed).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        """Update a breed (full or partial)."""
        instance = self.get_object()
        serializer = self.get_serializer(
            instance,
            data=request.data,
            partial=kwargs.pop('partial', False)
        )
        serializer.is_valid(raise_exception=True)

        try:
            breed = update_breed(breed_id=instance.id, **serializer.validated_data)
        except DuplicateBreedError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(BreedSerializer(breed).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a breed that no bird uses."""
        try:
            delete_breed(breed_id=kwargs.get('pk'))
        except BreedNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except BreedInUseError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(status=status.HTTP_204_NO_CONTENT)


class SourceFarmViewSet(viewsets.ModelViewSet):
    """
    ViewSet for SourceFarm CRUD operations.

    Reads are open to all staff, writes to owners.
    """

    queryset = SourceFarm.objects.prefetch_related('breeds')
    serializer_class = SourceFarmSerializer
    permission_classes = [IsAuthenticated, IsFarmOwnerOrReadOnly]
    pagination_class = BreedPagination

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return SourceFarmDetailSerializer
        return SourceFarmSerializer
