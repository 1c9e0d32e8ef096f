from chequetrack.constants import NotificationType


def test_seeded_notifications_on_first_access(app):
    notifications = app.notification_manager.list("u1")

    assert [n.id for n in notifications] == ["n1", "n2", "n3"]
    assert app.notification_manager.unread_count("u1") == 2


def test_create_prepends_unread_notification(org):
    org.notification_manager.create("admin", "First", "one")
    created = org.notification_manager.create("admin", "Second", "two", NotificationType.SUCCESS)

    notifications = org.notification_manager.list("admin")
    assert [n.title for n in notifications] == ["Second", "First"]
    assert created.id and created.read is False and created.date is not None
    assert notifications[0].type == NotificationType.SUCCESS


def test_list_filters_by_user(org):
    org.notification_manager.create("admin", "For admin", "x")
    org.notification_manager.create("mgrA", "For manager", "y")

    assert [n.title for n in org.notification_manager.list("mgrA")] == ["For manager"]
    assert len(org.notification_manager.list()) == 2


def test_mark_read_only_touches_the_matching_notification(org):
    keep = org.notification_manager.create("admin", "Keep", "x")
    target = org.notification_manager.create("admin", "Target", "y")

    org.notification_manager.mark_read(target.id)
    org.notification_manager.mark_read("does-not-exist")

    by_id = {n.id: n for n in org.notification_manager.list()}
    assert by_id[target.id].read is True
    assert by_id[keep.id].read is False
    assert by_id[target.id].title == "Target"


def test_urgent_returns_unread_warnings_and_errors(org):
    org.notification_manager.create("admin", "info", "x", NotificationType.INFO)
    warning = org.notification_manager.create("admin", "warn", "x", NotificationType.WARNING)
    error = org.notification_manager.create("admin", "err", "x", NotificationType.ERROR)
    org.notification_manager.mark_read(error.id)

    assert [n.id for n in org.notification_manager.urgent("admin")] == [warning.id]


def test_mark_all_read(org):
    org.notification_manager.create("admin", "a", "x")
    org.notification_manager.create("admin", "b", "x")
    org.notification_manager.create("mgrA", "c", "x")

    assert org.notification_manager.mark_all_read("admin") == 2
    assert org.notification_manager.unread_count("admin") == 0
    assert org.notification_manager.unread_count("mgrA") == 1
