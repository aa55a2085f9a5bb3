"""FilterSet for the user listing."""

from __future__ import annotations

import django_filters  # type: ignore
from django.contrib.auth import get_user_model  # type: ignore
from django.db.models import Q  # type: ignore

User = get_user_model()


class UserFilterSet(django_filters.FilterSet):
    role = django_filters.ChoiceFilter(choices=User.Role.choices)
    status = django_filters.ChoiceFilter(choices=User.Status.choices)
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = User
        fields = ["role", "status"]

    def filter_search(self, queryset, name, value):  # type: ignore
        if not value:
            return queryset
        return queryset.filter(Q(email__icontains=value) | Q(name__icontains=value))
