from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import LimitOffsetPagination
from django.conf import settings
from drf_spectacular.utils import extend_schema, OpenApiParameter
from apps.accounts.permissions import IsFarmOwner, IsFarmOwnerOrReadOnly
from .models import Bird
from .serializers import (
    BirdSerializer,
    BirdListSerializer,
    BirdWriteSerializer,
    BirdFilterSerializer,
    BirdNoteSerializer,
    CoopAssignmentSerializer,
    BreedCompositionInputSerializer,
    ParentCompositionInputSerializer,
    BreedCompositionResponseSerializer,
    BulkActionSerializer,
    BirdLookupSerializer,
    breed_composition_payload,
)
from .services import (
    create_bird,
    update_bird,
    archive_bird,
    set_breed_composition,
    add_bird_note,
    search_birds,
    get_offspring,
    get_bird_by_id,
    validate_parents,
    composition_from_parents,
    bulk_update_birds,
    find_bird_by_rfid,
    get_total_percentage,
    is_complete,
    BirdNotFoundError,
    InvalidParentError,
    InvalidBreedCompositionError,
    BulkActionError,
)


class BirdPagination(LimitOffsetPagination):
    """Limit/offset pagination for the flock list."""
    default_limit = settings.BIRD_PAGE_SIZE
    max_limit = 500


def _composition_response(composition):
    """Composition with completeness flags for clients to warn on."""
    return {
        'breed_composition': composition,
        'total_percentage': float(get_total_percentage(composition)),
        'is_complete': is_complete(composition),
    }


class BirdViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Bird CRUD operations.

    list: Get birds (with filters, limit/offset paginated)
    create: Create a bird with identifiers, composition and coop (owners only)
    retrieve: Get a specific bird
    update: Update a bird (owners only)
    destroy: Archive a bird (owners only)
    """

    queryset = Bird.objects.select_related('coop', 'sire', 'dam').prefetch_related(
        'identifiers',
        'breed_composition__breed',
    )
    serializer_class = BirdSerializer
    permission_classes = [IsAuthenticated, IsFarmOwnerOrReadOnly]
    pagination_class = BirdPagination

    def get_queryset(self):
        """Filter the list using input serializer validation."""
        if self.action != 'list':
            return super().get_queryset()

        filter_serializer = BirdFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return search_birds(**filter_serializer.validated_data)

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action == 'list':
            return BirdListSerializer
        elif self.action in ['create', 'update', 'partial_update']:
            return BirdWriteSerializer
        return BirdSerializer

    def create(self, request, *args, **kwargs):
        """Create a bird, its identifiers and its coop placement atomically."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            bird = create_bird(
                created_by=request.user,
                **serializer.validated_data
            )
        except (InvalidParentError, InvalidBreedCompositionError) as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        bird = get_bird_by_id(bird_id=bird.id)
        return Response(
            BirdSerializer(bird).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        """Update a bird (full or partial)."""
        serializer = self.get_serializer(
            data=request.data,
            partial=kwargs.pop('partial', False)
        )
        serializer.is_valid(raise_exception=True)

        try:
            update_bird(bird_id=kwargs.get('pk'), **serializer.validated_data)
        except BirdNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except (InvalidParentError, InvalidBreedCompositionError) as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        bird = get_bird_by_id(bird_id=kwargs.get('pk'))
        return Response(BirdSerializer(bird).data)

    def destroy(self, request, *args, **kwargs):
        """Soft delete (archive) a bird."""
        try:
            archive_bird(bird_id=kwargs.get('pk'))
        except BirdNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['get'])
    def offspring(self, request, pk=None):
        """
        Get all chicks of this bird.

        GET /api/birds/{id}/offspring/
        """
        bird = self.get_object()
        serializer = BirdListSerializer(get_offspring(bird_id=bird.id), many=True)
        return Response(serializer.data)

    @extend_schema(request=BirdNoteSerializer, responses={200: BirdNoteSerializer(many=True), 201: BirdNoteSerializer})
    @action(detail=True, methods=['get', 'post'], permission_classes=[IsAuthenticated])
    def notes(self, request, pk=None):
        """
        List or add notes. Any staff member may add notes.

        GET  /api/birds/{id}/notes/
        POST /api/birds/{id}/notes/
        Body: {"content": "..."}
        """
        bird = self.get_object()

        if request.method == 'GET':
            notes = bird.notes.select_related('created_by')
            return Response(BirdNoteSerializer(notes, many=True).data)

        serializer = BirdNoteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        note = add_bird_note(
            bird_id=bird.id,
            content=serializer.validated_data['content'],
            created_by=request.user,
        )
        return Response(BirdNoteSerializer(note).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=BreedCompositionInputSerializer, responses={200: BreedCompositionResponseSerializer})
    @action(detail=True, methods=['get', 'put'])
    def breeds(self, request, pk=None):
        """
        Read or replace the bird's breed composition.

        GET /api/birds/{id}/breeds/
        PUT /api/birds/{id}/breeds/ (owners only, marks the composition hand-entered)
        Body: {"breed_composition": [{"breed_id": "...", "percentage": 50.0}]}
        """
        bird = self.get_object()

        if request.method == 'PUT':
            serializer = BreedCompositionInputSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            try:
                set_breed_composition(
                    bird_id=bird.id,
                    breed_composition=serializer.validated_data['breed_composition'],
                )
            except InvalidBreedCompositionError as e:
                return Response(
                    {'error': str(e)},
                    status=status.HTTP_400_BAD_REQUEST
                )
            bird = get_bird_by_id(bird_id=bird.id)

        payload = _composition_response(breed_composition_payload(bird))
        payload['breed_override'] = bird.breed_override
        return Response(payload)

    @action(detail=True, methods=['get'], url_path='coop-history')
    def coop_history(self, request, pk=None):
        """
        Get the bird's coop placement history, newest first.

        GET /api/birds/{id}/coop-history/
        """
        bird = self.get_object()
        assignments = bird.coop_assignments.select_related('coop')
        return Response(CoopAssignmentSerializer(assignments, many=True).data)

    @extend_schema(request=ParentCompositionInputSerializer, responses={200: BreedCompositionResponseSerializer})
    @action(
        detail=False,
        methods=['post'],
        url_path='breed-composition',
        permission_classes=[IsAuthenticated],
    )
    def calculate_breed_composition(self, request):
        """
        Preview a chick's breed composition from a sire and dam.

        POST /api/birds/breed-composition/
        Body: {"sire_id": "...", "dam_id": "..."}
        """
        serializer = ParentCompositionInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            sire, dam = validate_parents(
                sire_id=serializer.validated_data.get('sire_id'),
                dam_id=serializer.validated_data.get('dam_id'),
            )
        except InvalidParentError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        composition = [
            {'breed_id': entry['breed_id'], 'percentage': float(entry['percentage'])}
            for entry in composition_from_parents(sire, dam)
        ]
        return Response(_composition_response(composition))

    @extend_schema(request=BulkActionSerializer)
    @action(
        detail=False,
        methods=['post'],
        url_path='bulk',
        permission_classes=[IsAuthenticated, IsFarmOwner],
    )
    def bulk(self, request):
        """
        Move, restatus or archive many birds at once (owners only).

        POST /api/birds/bulk/
        Body: {"action": "move|status|delete", "bird_ids": [...], "value": "..."}
        """
        serializer = BulkActionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            updated = bulk_update_birds(**serializer.validated_data)
        except BulkActionError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response({
            'success': True,
            'updated': updated,
            'action': serializer.validated_data['action'],
        })

    @extend_schema(
        parameters=[OpenApiParameter('rfid', str, description='Scanned RFID tag id')],
        responses={200: BirdLookupSerializer},
    )
    @action(detail=False, methods=['get'], url_path='lookup', permission_classes=[IsAuthenticated])
    def lookup(self, request):
        """
        Find the bird carrying a scanned RFID tag.

        GET /api/birds/lookup/?rfid=...
        """
        tag_id = request.query_params.get('rfid', '').strip()
        if not tag_id:
            return Response(
                {'error': 'RFID tag ID required'},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            bird = find_bird_by_rfid(tag_id=tag_id)
        except BirdNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(BirdLookupSerializer(bird).data)
