from django.conf import settings


def is_user_in_group(user, group_name):
    """Checks if a user belongs to a specific group."""
    return user.is_authenticated and user.groups.filter(name=group_name).exists()


def is_teacher(user):
    """Checks if the user is a teacher."""
    return is_user_in_group(user, settings.TEACHER_GROUP_NAME)
