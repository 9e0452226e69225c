#!/usr/bin/env python3
import sys
import os
import unittest
from unittest.mock import Mock
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, os.path.dirname(__file__))

from sensu_teams.config import HandlerConfig
from sensu_teams.controller import handle_event
from sensu_teams.errors import ConfigurationError, DeliveryError, InputError, ValidationError
from event_fixtures import make_event_dict, make_stream

CONFIG = HandlerConfig(
    webhook_url="https://teams.example.com/hook",
    channel="#ops",
    dashboard_url="https://dash.example.com/",
    timeout=5,
)


class TestHandleEvent(unittest.TestCase):
    def test_valid_event_is_sent_once(self):
        sender = Mock()
        message = handle_event(CONFIG, make_stream(make_event_dict(status=2, output="disk full")), sender=sender)

        sender.assert_called_once()
        url, payload, timeout = sender.call_args[0]
        self.assertEqual(url, "https://teams.example.com/hook")
        self.assertEqual(timeout, 5)
        self.assertEqual(payload["themeColor"], "#FF0000")
        self.assertEqual(payload["text"], "CRITICAL")
        self.assertEqual(payload["section"][0]["text"], "disk full")
        self.assertEqual(payload, message.to_payload())

    def test_malformed_json_is_not_sent(self):
        sender = Mock()
        with self.assertRaises(InputError):
            handle_event(CONFIG, make_stream('{"entity":'), sender=sender)
        sender.assert_not_called()

    def test_missing_entity_name_is_not_sent(self):
        sender = Mock()
        data = make_event_dict()
        del data["entity"]["metadata"]["name"]
        with self.assertRaises(ValidationError):
            handle_event(CONFIG, make_stream(data), sender=sender)
        sender.assert_not_called()

    def test_invalid_check_is_not_sent(self):
        sender = Mock()
        data = make_event_dict(check_name="")
        with self.assertRaises(ValidationError):
            handle_event(CONFIG, make_stream(data), sender=sender)
        sender.assert_not_called()

    def test_empty_webhook_fails_before_reading(self):
        sender = Mock()
        stream = Mock()
        config = HandlerConfig(webhook_url="")

        with self.assertRaises(ConfigurationError):
            handle_event(config, stream, sender=sender)
        stream.read.assert_not_called()
        sender.assert_not_called()

    def test_bad_dashboard_does_not_block_delivery(self):
        sender = Mock()
        config = HandlerConfig(webhook_url="https://teams.example.com/hook", dashboard_url="not a url")

        handle_event(config, make_stream(make_event_dict()), sender=sender)

        payload = sender.call_args[0][1]
        self.assertEqual(payload["PotentialAction"][0]["targets"][0]["uri"], "")

    def test_delivery_error_propagates(self):
        sender = Mock(side_effect=DeliveryError("webhook returned HTTP 500: oops", status_code=500))
        with self.assertRaises(DeliveryError):
            handle_event(CONFIG, make_stream(make_event_dict()), sender=sender)
        self.assertEqual(sender.call_count, 1)


if __name__ == '__main__':
    unittest.main()
