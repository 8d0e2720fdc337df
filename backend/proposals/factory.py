"""
Factory classes for proposals.
"""
import factory
from factory.django import DjangoModelFactory

from users.factory import StudentFactory, SupervisorFactory
from proposals.models import Proposal, ProposalStatus, initial_steps


class ProposalFactory(DjangoModelFactory):
    """Pending proposal assigned to a supervisor."""

    class Meta:
        model = Proposal

    title = factory.Sequence(lambda n: f"Inventory Tracker {n} for Local Retailers")
    description = factory.Faker('paragraph')
    research_area = 'web'
    group_members = ''
    submitted_by = factory.SubFactory(StudentFactory)
    supervisor = factory.SubFactory(SupervisorFactory)
    supervisor_name = factory.LazyAttribute(lambda o: o.supervisor.full_name if o.supervisor else '')
    similarity_score = 20
    steps = factory.LazyAttribute(lambda o: initial_steps(o.supervisor_name))
    status = ProposalStatus.PENDING


class ApprovedProposalFactory(ProposalFactory):
    status = ProposalStatus.APPROVED
    forwarded_to_coordinator = True


class ActivatedProposalFactory(ProposalFactory):
    status = ProposalStatus.ACTIVATED
    forwarded_to_coordinator = True
