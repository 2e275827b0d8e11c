from rest_framework import serializers
from .models import CustomUser


class LoginSerializer(serializers.Serializer):
    """Credentials posted to the login endpoint"""
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )


class SessionUserSerializer(serializers.ModelSerializer):
    """Identity of the authenticated caller: role, company and employee"""
    role = serializers.CharField(source='user_type.type_name', read_only=True)
    company_id = serializers.IntegerField(read_only=True, allow_null=True)
    employee_id = serializers.IntegerField(read_only=True, allow_null=True)

    class Meta:
        model = CustomUser
        fields = ['id', 'email', 'name', 'role', 'company_id', 'employee_id']
        read_only_fields = fields
