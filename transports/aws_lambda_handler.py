"""AWS Lambda entry point: the SideEffects API behind the HTTP bridge."""

from side_effects import api, bridge

handler = bridge.http_api({"app": api.init()})
