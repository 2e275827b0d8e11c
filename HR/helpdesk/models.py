from django.db import models
from core.base.models import AuditMixin
from core.base.managers import CompanyScopedQuerySet


class ChatSession(AuditMixin, models.Model):
    """HR chatbot conversation opened by an employee."""
    company = models.ForeignKey(
        'person.Company',
        on_delete=models.CASCADE,
        related_name='chat_sessions'
    )
    employee = models.ForeignKey(
        'person.Employee',
        on_delete=models.CASCADE,
        related_name='chat_sessions'
    )
    title = models.CharField(max_length=255, blank=True, default='')

    class Meta:
        db_table = 'hr_chat_session'
        ordering = ['-created_at']

    def __str__(self):
        return self.title or f"Chat #{self.pk}"


class ChatMessageQuerySet(CompanyScopedQuerySet):
    company_lookup = 'session__company_id'
    employee_lookup = 'session__employee_id'

    def open_escalations(self):
        """Messages handed over to HR that nobody has resolved yet."""
        return self.filter(escalated=True, escalation_resolved=False)


class ChatMessage(AuditMixin, models.Model):
    """
    Message inside a chat session.

    A message is escalated when the employee asks for a human HR officer.
    """

    class Role(models.TextChoices):
        USER = 'USER', 'User'
        ASSISTANT = 'ASSISTANT', 'Assistant'

    session = models.ForeignKey(
        ChatSession,
        on_delete=models.CASCADE,
        related_name='messages'
    )
    role = models.CharField(max_length=10, choices=Role.choices, default=Role.USER)
    content = models.TextField()
    escalated = models.BooleanField(default=False)
    escalation_resolved = models.BooleanField(default=False)

    objects = ChatMessageQuerySet.as_manager()

    class Meta:
        db_table = 'hr_chat_message'
        ordering = ['created_at']

    def __str__(self):
        return f"{self.role}: {self.content[:40]}"
