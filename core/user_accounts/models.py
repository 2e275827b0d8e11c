"""
User Account Models
Handles user authentication and the role each account carries.
"""
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models
from django.core.exceptions import PermissionDenied


class RoleChoices(models.TextChoices):
    """Role names stored in UserType.type_name."""
    EMPLOYEE = 'employee', 'Employee'
    MANAGER = 'manager', 'Manager'
    HR_ADMIN = 'hr_admin', 'HR Administrator'
    SUPER_ADMIN = 'super_admin', 'Super Administrator'
    EXECUTIVE = 'executive', 'Executive'


# Roles that act on direct reports, and roles that administer a whole company.
MANAGER_ROLES = frozenset({RoleChoices.MANAGER.value, RoleChoices.HR_ADMIN.value, RoleChoices.SUPER_ADMIN.value})
HR_ROLES = frozenset({RoleChoices.HR_ADMIN.value, RoleChoices.SUPER_ADMIN.value})


class UserType(models.Model):
    """
    User type (role) of an account.
    Decides which parts of the HR data the account may see.
    """
    type_name = models.CharField(max_length=50, unique=True, db_index=True)
    description = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'user_types'
        verbose_name = 'User Type'
        verbose_name_plural = 'User Types'

    def __str__(self):
        return self.type_name


class CustomUserManager(BaseUserManager):
    """
    Custom user manager for CustomUser model.
    Handles user creation with a role, company and employee link.
    """

    USER_TYPE_DESCRIPTIONS = {
        'employee': 'Employee with self-service access',
        'manager': 'Line manager of one or more employees',
        'hr_admin': 'HR administrator of a company',
        'super_admin': 'Super administrator with full system access',
        'executive': 'Executive with reporting access',
    }

    def create_user(self, email, name, password=None, user_type_name=RoleChoices.EMPLOYEE, **extra_fields):
        """
        Create and save a user with any user type.

        Args:
            email: User's email address (used for authentication)
            name: User's full name
            password: User's password (will be hashed)
            user_type_name: Role name (see RoleChoices); unknown names are stored as-is
            **extra_fields: Additional fields (company, employee, ...)

        Returns:
            CustomUser: The created user instance
        """
        if not email:
            raise ValueError('Email is required')
        if not name:
            raise ValueError('Name is required')

        email = self.normalize_email(email)
        user_type_name = str(user_type_name)

        user_type, _ = UserType.objects.get_or_create(
            type_name=user_type_name,
            defaults={'description': self.USER_TYPE_DESCRIPTIONS.get(user_type_name, '')}
        )

        user = self.model(
            email=email,
            name=name,
            user_type=user_type,
            **extra_fields
        )
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, name, password=None, **extra_fields):
        """
        Create and save a super admin user.
        Required by Django for the createsuperuser management command.
        """
        return self.create_user(
            email=email,
            name=name,
            password=password,
            user_type_name=RoleChoices.SUPER_ADMIN,
            **extra_fields
        )


class CustomUser(AbstractBaseUser):
    """Custom user model with email authentication, linked to an employee record"""
    email = models.EmailField(unique=True, db_index=True)
    name = models.CharField(max_length=255)

    # Relationships
    user_type = models.ForeignKey(
        UserType,
        on_delete=models.PROTECT,
        related_name='users'
    )
    company = models.ForeignKey(
        'person.Company',
        on_delete=models.PROTECT,
        related_name='users',
        null=True,
        blank=True,
        help_text="Company (tenant) the account belongs to"
    )
    employee = models.OneToOneField(
        'person.Employee',
        on_delete=models.SET_NULL,
        related_name='user_account',
        null=True,
        blank=True,
        help_text="Employee record of the account holder, if any"
    )

    objects = CustomUserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        db_table = 'custom_users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return f"{self.name} ({self.email})"

    @property
    def role(self):
        """Role name of the account (UserType.type_name)."""
        return self.user_type.type_name

    def is_super_admin(self):
        return self.role == RoleChoices.SUPER_ADMIN

    def is_hr_admin(self):
        """
        Check if user administers HR for the company.

        Returns:
            bool: True for hr_admin and super_admin
        """
        return self.role in HR_ROLES

    def is_manager(self):
        """
        Check if user may act on direct reports.

        Returns:
            bool: True for manager, hr_admin and super_admin
        """
        return self.role in MANAGER_ROLES

    def delete(self, *args, **kwargs):
        """
        Override delete to prevent deletion of super admin.
        """
        if self.is_super_admin():
            raise PermissionDenied(
                "Cannot delete super admin user. Super admin is protected from deletion."
            )
        return super().delete(*args, **kwargs)
