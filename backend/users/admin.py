from django.contrib import admin
from django import forms
from .models import User


class UserAdminForm(forms.ModelForm):
    """Admin form with a plain password field that is hashed on save."""
    new_password = forms.CharField(
        required=False,
        widget=forms.PasswordInput,
        help_text="Leave blank to keep the current password.",
    )

    class Meta:
        model = User
        exclude = ['password', 'last_login']

    def save(self, commit=True):
        user = super().save(commit=False)
        if self.cleaned_data.get('new_password'):
            user.set_password(self.cleaned_data['new_password'])
        if commit:
            user.save()
        return user


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """Accounts with role and supervision load."""
    form = UserAdminForm
    list_display = ['email', 'full_name', 'role', 'load_display', 'is_active', 'created_at']
    list_filter = ['role', 'is_active', 'is_staff', 'created_at']
    search_fields = ['email', 'full_name', 'id_number', 'employee_number']
    ordering = ['email']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Authentication', {
            'fields': ('email', 'new_password', 'role')
        }),
        ('Personal Information', {
            'fields': ('full_name', 'id_number', 'employee_number', 'program', 'faculty')
        }),
        ('Supervision', {
            'fields': ('research_areas', 'current_groups', 'max_capacity'),
            'description': 'Only meaningful for supervisors.'
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff'),
        }),
        ('Important Dates', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    @admin.display(description='Load')
    def load_display(self, obj):
        if obj.role != 'supervisor':
            return '-'
        return f"{obj.current_groups}/{obj.max_capacity}"
