"""
Factory classes for logbooks.
"""
import factory
from factory.django import DjangoModelFactory

from logbooks.models import Logbook, LogbookStatus
from logbooks.services import week_date_range
from proposals.factory import ActivatedProposalFactory


class LogbookFactory(DjangoModelFactory):
    """Pending logbook on an activated project."""

    class Meta:
        model = Logbook

    proposal = factory.SubFactory(ActivatedProposalFactory)
    student = factory.LazyAttribute(lambda o: o.proposal.submitted_by)
    student_name = factory.LazyAttribute(lambda o: o.student.full_name)
    student_number = factory.LazyAttribute(lambda o: o.student.id_number)
    supervisor = factory.LazyAttribute(lambda o: o.proposal.supervisor)
    supervisor_name = factory.LazyAttribute(lambda o: o.proposal.supervisor_name)
    project_title = factory.LazyAttribute(lambda o: o.proposal.title)
    week_no = factory.Sequence(lambda n: (n % 16) + 1)
    meeting_no = 1
    date_range = factory.LazyAttribute(lambda o: week_date_range(o.week_no))
    work_done = factory.LazyFunction(lambda: ['Built the data model'])
    record_of_discussion = factory.LazyFunction(lambda: ['Reviewed progress'])
    problems_encountered = factory.LazyFunction(list)
    status = LogbookStatus.PENDING
