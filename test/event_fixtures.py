import io
import json


def make_event_dict(status=2, output="disk full", entity_name="web-01", check_name="check-disk"):
    return {
        "entity": {
            "entity_class": "agent",
            "system": {"hostname": entity_name},
            "metadata": {"name": entity_name, "namespace": "default"},
        },
        "check": {
            "metadata": {"name": check_name, "namespace": "default"},
            "interval": 60,
            "status": status,
            "output": output,
        },
    }


def make_stream(data):
    if isinstance(data, dict):
        data = json.dumps(data)
    if isinstance(data, str):
        data = data.encode("utf-8")
    return io.BytesIO(data)
