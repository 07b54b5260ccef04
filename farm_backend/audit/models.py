# audit/models.py

from django.db import models

from storage.records import new_id


class AuditLog(models.Model):
    """
    One row per recorded action.

    Rows written by AuditLogMiddleware carry the HTTP method as `action`,
    the first path segment after /api/ as `module` and {path, body} as `changes`.
    """

    id = models.CharField(primary_key=True, max_length=36, default=new_id, editable=False)
    user_id = models.CharField(max_length=36, db_index=True)
    action = models.CharField(max_length=20)  # POST/PATCH/DELETE, or CREATE, LOGIN, ...
    module = models.CharField(max_length=50, db_index=True)
    entity_type = models.CharField(max_length=50, null=True, blank=True)
    entity_id = models.CharField(max_length=36, null=True, blank=True)
    changes = models.JSONField(null=True, blank=True)
    ip_address = models.CharField(max_length=45, null=True, blank=True)
    timestamp = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "audit_logs"
        ordering = ["timestamp"]

    def __str__(self):
        return f"{self.action} {self.module} by {self.user_id}"
