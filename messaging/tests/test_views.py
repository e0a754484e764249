import pytest
from django.core.management import call_command

from messaging.models import ChatSession, PeerMessage

BASE_URL = "/api/v1/messaging"


@pytest.mark.django_db
class TestMatchmakingApi:
    def test_join_then_match(self, api_client, member, other_member):
        api_client.force_authenticate(user=member)
        first = api_client.post(f"{BASE_URL}/queue/join/", {}, format="json")
        assert first.status_code == 201
        assert first.data["matched"] is False
        assert first.data["position"] == 1

        api_client.force_authenticate(user=other_member)
        second = api_client.post(f"{BASE_URL}/queue/join/", {}, format="json")
        assert second.data["matched"] is True
        assert second.data["session"]["status"] == "matched"
        assert second.data["session"]["partner_anonymous_id"] == member.anonymous_id

        api_client.force_authenticate(user=member)
        current = api_client.get(f"{BASE_URL}/sessions/current/")
        assert current.data["session"]["partner_anonymous_id"] == other_member.anonymous_id

    def test_position_and_leave(self, member_client):
        member_client.post(f"{BASE_URL}/queue/join/", {}, format="json")
        assert member_client.get(f"{BASE_URL}/queue/position/").data["position"] == 1

        assert member_client.post(f"{BASE_URL}/queue/leave/").data["removed"] == 1
        assert member_client.get(f"{BASE_URL}/queue/position/").data["position"] is None

    def test_no_current_session(self, member_client):
        assert member_client.get(f"{BASE_URL}/sessions/current/").data == {"session": None}

    def test_status_errors_are_mapped(self, api_client, member, other_member, make_user):
        session = ChatSession.objects.create(
            session_id="session-1-abcdefghi",
            participant_1=member,
            participant_2=other_member,
            status=ChatSession.STATUS_ENDED,
        )
        url = f"{BASE_URL}/sessions/{session.session_id}/status/"

        api_client.force_authenticate(user=member)
        assert api_client.post(url, {"status": "active"}, format="json").status_code == 400
        assert api_client.post(url, {"status": "bogus"}, format="json").status_code == 400
        missing = api_client.post(
            f"{BASE_URL}/sessions/session-0-nothere/status/", {"status": "ended"}, format="json"
        )
        assert missing.status_code == 404

        api_client.force_authenticate(user=make_user())
        assert api_client.post(url, {"status": "ended"}, format="json").status_code == 403

    def test_signal_and_report(self, api_client, member, other_member):
        session = ChatSession.objects.create(
            session_id="session-2-abcdefghi",
            participant_1=member,
            participant_2=other_member,
            status=ChatSession.STATUS_MATCHED,
        )
        api_client.force_authenticate(user=member)

        signal = api_client.post(
            f"{BASE_URL}/sessions/{session.session_id}/signal/",
            {"message_type": "offer", "message_data": {"sdp": "v=0"}},
            format="json",
        )
        assert signal.status_code == 201

        report = api_client.post(
            f"{BASE_URL}/sessions/{session.session_id}/report/",
            {"reason": "spam"},
            format="json",
        )
        assert report.status_code == 201
        session.refresh_from_db()
        assert session.status == ChatSession.STATUS_REPORTED

    def test_partner_polls_signals(self, api_client, member, other_member, make_user):
        session = ChatSession.objects.create(
            session_id="session-3-abcdefghi",
            participant_1=member,
            participant_2=other_member,
            status=ChatSession.STATUS_MATCHED,
        )
        url = f"{BASE_URL}/sessions/{session.session_id}/signal/"

        api_client.force_authenticate(user=member)
        offer = api_client.post(
            url, {"message_type": "offer", "message_data": {"sdp": "v=0"}}, format="json"
        )
        assert api_client.get(url).data == []

        api_client.force_authenticate(user=other_member)
        received = api_client.get(url)
        assert received.status_code == 200
        assert [m["id"] for m in received.data] == [offer.data["id"]]
        assert received.data[0]["message_data"] == {"sdp": "v=0"}
        assert api_client.get(url, {"after": offer.data["id"]}).data == []
        assert api_client.get(url, {"after": "soon"}).status_code == 400

        api_client.force_authenticate(user=make_user())
        assert api_client.get(url).status_code == 403

    def test_connection_log(self, api_client, member, other_member):
        session = ChatSession.objects.create(
            session_id="session-4-abcdefghi",
            participant_1=member,
            participant_2=other_member,
            status=ChatSession.STATUS_ACTIVE,
        )
        url = f"{BASE_URL}/sessions/{session.session_id}/connection-log/"
        api_client.force_authenticate(user=member)

        logged = api_client.post(
            url,
            {"status": "failed", "error_message": "ice timeout", "metadata": {"attempt": 1}},
            format="json",
        )
        assert logged.status_code == 201
        assert logged.data["status"] == "failed"
        assert session.connection_logs.get().user == member

        assert api_client.post(url, {"status": "lost"}, format="json").status_code == 400
        missing = api_client.post(
            f"{BASE_URL}/sessions/session-0-nothere/connection-log/",
            {"status": "connected"},
            format="json",
        )
        assert missing.status_code == 404

    def test_requires_authentication(self, api_client):
        assert api_client.post(f"{BASE_URL}/queue/join/", {}, format="json").status_code == 401


@pytest.mark.django_db
class TestRoomMessages:
    def test_sender_is_only_exposed_by_anonymous_id(self, api_client, member, other_member):
        api_client.force_authenticate(user=member)
        posted = api_client.post(
            f"{BASE_URL}/rooms/general/messages/", {"content": "  hello there  "}, format="json"
        )
        assert posted.status_code == 201
        assert posted.data["content"] == "hello there"

        api_client.force_authenticate(user=other_member)
        listed = api_client.get(f"{BASE_URL}/rooms/general/messages/")
        message = listed.data[0]
        assert message["sender_anonymous_id"] == member.anonymous_id
        assert message["is_own"] is False
        assert member.email not in str(message)
        assert "sender" not in message

    def test_rooms_are_separate(self, member_client, member):
        PeerMessage.objects.create(sender=member, room_id="exams", content="good luck")
        assert member_client.get(f"{BASE_URL}/rooms/general/messages/").data == []

    def test_blank_message_is_rejected(self, member_client):
        response = member_client.post(
            f"{BASE_URL}/rooms/general/messages/", {"content": "   "}, format="json"
        )
        assert response.status_code == 400


@pytest.mark.django_db
def test_cleanup_command(member, capsys):
    call_command("cleanup_matchmaking")
    assert "Matchmaking cleanup complete" in capsys.readouterr().out
