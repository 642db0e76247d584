"""
Management command to seed a small demo farm.

Usage:
    python manage.py create_sample_data [--clear]

This creates:
- 2 users (owner, worker)
- 3 breeds and 3 coops
- A breeding trio with two chicks
- Two weeks of eggs, one of them in the incubator
- Feed stock, a vaccination and a health incident
- A default bird report preset for the owner
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone
from decimal import Decimal
from datetime import timedelta

from apps.accounts.models import User, UserRole, Language
from apps.breeds.models import Breed
from apps.coops.models import Coop, CoopType
from apps.birds.models import Bird, BirdSex, BirdStatus, IdentifierType
from apps.birds.services import create_bird
from apps.eggs.models import EggRecord, ShellQuality
from apps.eggs.services import record_egg, start_incubation
from apps.feed.models import FeedInventory, FeedConsumption, FeedType
from apps.feed.services import add_feed_stock
from apps.health.models import HealthIncident, Medication, Vaccination
from apps.health.services import create_health_record
from apps.reports.models import ReportPreset, ReportType
from apps.reports.services import create_preset
from apps.weights.models import WeightRecord, WeightMilestone


class Command(BaseCommand):
    help = 'Create a demo farm for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing farm data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        breeds = self.create_breeds()
        coops = self.create_coops()
        birds = self.create_birds(users['owner'], breeds, coops)
        self.create_eggs(users, birds['hens'])
        self.create_feed()
        self.create_health_records(users['worker'], birds)
        self.create_presets(users['owner'])

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  owner@farm.example.com / password123 (owner)')
        self.stdout.write('  worker@farm.example.com / password123 (worker, Tagalog)')

    def clear_data(self):
        """Clear farm data; birds go before breeds and coops they reference."""
        ReportPreset.objects.all().delete()
        Medication.objects.all().delete()
        HealthIncident.objects.all().delete()
        Vaccination.objects.all().delete()
        FeedConsumption.objects.all().delete()
        FeedInventory.objects.all().delete()
        EggRecord.objects.all().delete()
        WeightRecord.objects.all().delete()
        Bird.objects.update(sire=None, dam=None)
        Bird.objects.all().delete()
        Coop.objects.all().delete()
        Breed.objects.all().delete()
        User.objects.filter(email__in=['owner@farm.example.com', 'worker@farm.example.com']).delete()

    def create_users(self):
        """Create the farm owner and a worker."""
        self.stdout.write('  Creating users...')

        owner, _ = User.objects.get_or_create(
            email='owner@farm.example.com',
            defaults={
                'display_name': 'Mang Tonyo',
                'role': UserRole.OWNER,
            }
        )
        owner.set_password('password123')
        owner.save()

        worker, _ = User.objects.get_or_create(
            email='worker@farm.example.com',
            defaults={
                'display_name': 'Jun',
                'role': UserRole.WORKER,
                'language': Language.TAGALOG,
            }
        )
        worker.set_password('password123')
        worker.save()

        return {'owner': owner, 'worker': worker}

    def create_breeds(self):
        self.stdout.write('  Creating breeds...')

        breeds_data = [
            ('Asil', 'ASL', ['Kulang', 'Reza']),
            ('Kelso', 'KLS', ['Yellow-legged']),
            ('Sweater', 'SWT', ['Yellow-legged', 'Green-legged']),
        ]

        breeds = {}
        for name, code, varieties in breeds_data:
            breed, _ = Breed.objects.get_or_create(
                code=code,
                defaults={'name': name, 'varieties': varieties}
            )
            breeds[code] = breed

        return breeds

    def create_coops(self):
        self.stdout.write('  Creating coops...')

        coops_data = [
            ('Breeding Pen 1', CoopType.BREEDING_PEN, 3),
            ('Grow-out A', CoopType.GROW_OUT, 20),
            ('Brooder', CoopType.BROODER, 30),
        ]

        coops = {}
        for name, coop_type, capacity in coops_data:
            coop, _ = Coop.objects.get_or_create(
                name=name,
                defaults={'coop_type': coop_type, 'capacity': capacity}
            )
            coops[coop_type] = coop

        return coops

    def create_birds(self, owner, breeds, coops):
        """Create a trio in the breeding pen and two of their chicks."""
        self.stdout.write('  Creating birds...')

        if Bird.objects.exists():
            self.stdout.write('    Birds already exist, skipping')
            return {'hens': list(Bird.objects.filter(sex=BirdSex.FEMALE))}

        today = timezone.localdate()
        breeding_pen = coops[CoopType.BREEDING_PEN]

        stag = create_bird(
            created_by=owner,
            name='Bruno',
            sex=BirdSex.MALE,
            status=BirdStatus.BREEDING,
            hatch_date=today - timedelta(days=540),
            coop=breeding_pen,
            color='Red',
            comb_type='PEA',
            identifiers=[{'id_type': IdentifierType.BAND, 'id_value': 'B-001'}],
            breed_composition=[{'breed_id': breeds['ASL'].id, 'percentage': Decimal('100.0')}],
        )

        hens = []
        for number, (name, code) in enumerate([('Maya', 'KLS'), ('Luna', 'SWT')], start=2):
            hens.append(create_bird(
                created_by=owner,
                name=name,
                sex=BirdSex.FEMALE,
                status=BirdStatus.BREEDING,
                hatch_date=today - timedelta(days=420),
                coop=breeding_pen,
                color='Wheaten',
                identifiers=[
                    {'id_type': IdentifierType.BAND, 'id_value': f'B-00{number}'},
                    {'id_type': IdentifierType.WING_BAND, 'id_value': f'W-0{number}'},
                ],
                breed_composition=[{'breed_id': breeds[code].id, 'percentage': Decimal('100.0')}],
            ))

        chicks = []
        for number, hen in enumerate(hens, start=1):
            chick = create_bird(
                created_by=owner,
                hatch_date=today - timedelta(days=30),
                sire_id=stag.id,
                dam_id=hen.id,
                coop=coops[CoopType.BROODER],
                identifiers=[{'id_type': IdentifierType.WING_BAND, 'id_value': f'C-{number:03d}'}],
            )
            chicks.append(chick)
            for days, grams, milestone in [(30, Decimal('38'), WeightMilestone.HATCH),
                                           (23, Decimal('72'), WeightMilestone.WEEK_1)]:
                WeightRecord.objects.create(
                    bird=chick,
                    date=today - timedelta(days=days),
                    weight_grams=grams,
                    milestone=milestone,
                    recorded_by=owner,
                )

        return {'stag': stag, 'hens': hens, 'chicks': chicks}

    def create_eggs(self, users, hens):
        """Create two weeks of eggs and set the freshest one."""
        self.stdout.write('  Creating eggs...')

        if EggRecord.objects.exists():
            self.stdout.write('    Eggs already exist, skipping')
            return

        today = timezone.localdate()
        latest = None
        for days_ago in range(14, 0, -1):
            for hen in hens:
                # Each hen lays every other day
                if (days_ago + hens.index(hen)) % 2:
                    continue
                latest = record_egg(
                    bird_id=hen.id,
                    recorded_by=users['worker'],
                    date=today - timedelta(days=days_ago),
                    egg_mark=f'{hen.name[0]}-{days_ago:02d}',
                    weight_grams=Decimal('45') + days_ago % 5,
                    shell_quality=ShellQuality.GOOD if days_ago % 7 else ShellQuality.FAIR,
                )

        if latest is not None:
            start_incubation(egg_id=latest.id, set_date=today, created_by=users['owner'])

    def create_feed(self):
        self.stdout.write('  Creating feed stock...')

        add_feed_stock(
            feed_type=FeedType.STARTER, brand='B-Meg', quantity_kg=Decimal('8'),
            cost_per_kg=Decimal('42.50'), reorder_level=Decimal('10'),
        )
        add_feed_stock(
            feed_type=FeedType.BREEDER, brand='Thunderbird', quantity_kg=Decimal('50'),
            cost_per_kg=Decimal('48.00'), reorder_level=Decimal('15'),
        )

    def create_health_records(self, worker, birds):
        self.stdout.write('  Creating health records...')

        if 'chicks' not in birds or HealthIncident.objects.exists():
            self.stdout.write('    Health records already exist, skipping')
            return

        today = timezone.localdate()
        create_health_record(
            Vaccination,
            bird_ids=[chick.id for chick in birds['chicks']],
            vaccine_name='Newcastle (B1)',
            date_given=today - timedelta(days=23),
            method='Eye drop',
            next_due_date=today + timedelta(days=3),
            administered_by=worker,
        )
        create_health_record(
            HealthIncident,
            bird_ids=[birds['hens'][0].id],
            date_noticed=today - timedelta(days=2),
            symptoms='Swollen eye, reduced appetite',
            treatment='Eye wash twice daily',
            reported_by=worker,
        )

    def create_presets(self, owner):
        self.stdout.write('  Creating report presets...')

        if ReportPreset.objects.filter(created_by=owner).exists():
            return

        create_preset(
            created_by=owner,
            name='Breeders',
            description='Birds currently in breeding pens',
            report_type=ReportType.BIRDS,
            config={
                'columns': ['band_number', 'name', 'sex', 'breed', 'coop'],
                'filters': {'status': [BirdStatus.BREEDING]},
                'sortColumn': 'band_number',
                'sortDirection': 'asc',
            },
            is_default=True,
        )
