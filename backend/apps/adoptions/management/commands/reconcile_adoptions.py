"""
Reconciliation management command.

Verifies adoption workflow invariants against stored data.
Run: python manage.py reconcile_adoptions
"""

from django.core.management.base import BaseCommand, CommandError
from django.db.models import Count

from apps.activity.models import ActivityLog
from apps.adoptions.models import AdoptionRequest, AdoptionStatus
from apps.adoptions.state_machine import ACTIVE_STATUSES
from apps.animals.models import AnimalStatus


class Command(BaseCommand):
    help = "Reconcile adoption requests against animal status and activity log"

    def handle(self, *args, **options):
        self.stdout.write("Starting adoption reconciliation...")

        errors = []
        warnings = []

        # Check 1: one active request per animal
        self.stdout.write("\n[1] Checking active requests per animal...")
        crowded = (
            AdoptionRequest.objects.filter(status__in=ACTIVE_STATUSES)
            .values("animal_id")
            .annotate(active=Count("id"))
            .filter(active__gt=1)
        )
        if crowded.exists():
            errors.append(f"Found {crowded.count()} animals with several active requests")
            for row in crowded[:10]:
                self.stdout.write(
                    self.style.ERROR(
                        f"  Animal {row['animal_id']}: {row['active']} active requests"
                    )
                )
        else:
            self.stdout.write(self.style.SUCCESS("  ✓ At most one active request per animal"))

        # Check 2: completed requests point at adopted animals
        self.stdout.write("\n[2] Checking completed adoptions...")
        not_adopted = AdoptionRequest.objects.filter(
            status=AdoptionStatus.COMPLETED
        ).exclude(animal__current_status=AnimalStatus.ADOPTED)
        if not_adopted.exists():
            errors.append(
                f"Found {not_adopted.count()} completed requests whose animal is not Adopted"
            )
        else:
            self.stdout.write(self.style.SUCCESS("  ✓ Completed requests have adopted animals"))

        # Check 3: approved requests hold their animal
        self.stdout.write("\n[3] Checking approved requests...")
        unreserved = AdoptionRequest.objects.filter(
            status=AdoptionStatus.APPROVED
        ).exclude(animal__current_status=AnimalStatus.RESERVED)
        for req in unreserved[:10]:
            warnings.append(
                f"Request {req.id} is Approved but animal {req.animal_id} is not Reserved"
            )
        if not unreserved.exists():
            self.stdout.write(self.style.SUCCESS("  ✓ Approved requests hold their animal"))

        # Check 4: every processed request has a log entry
        self.stdout.write("\n[4] Checking activity log completeness...")
        processed = AdoptionRequest.objects.exclude(status=AdoptionStatus.PENDING)
        for req in processed[:100]:  # Sample check
            has_entry = ActivityLog.objects.filter(
                entity_type="AdoptionRequest",
                entity_id=str(req.id),
                action_type__in=["PROCESS_ADOPTION", "CANCEL_ADOPTION"],
            ).exists()
            if not has_entry:
                warnings.append(
                    f"Request {req.id} (status={req.status}) has no activity entries"
                )

        if not any("activity entries" in w for w in warnings):
            self.stdout.write(self.style.SUCCESS("  ✓ Activity log entries present"))

        # Summary
        self.stdout.write("\n" + "=" * 50)
        if warnings:
            self.stdout.write(self.style.WARNING(f"\n⚠️  WARNINGS: {len(warnings)}"))
            for warning in warnings[:10]:
                self.stdout.write(self.style.WARNING(f"  - {warning}"))
        if errors:
            for error in errors:
                self.stdout.write(self.style.ERROR(f"  - {error}"))
            raise CommandError(f"Reconciliation failed with {len(errors)} error(s)")

        self.stdout.write(self.style.SUCCESS("\n✅ RECONCILIATION PASSED"))
