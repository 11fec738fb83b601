"""
Protocol buffer messages and service stubs for the v1 API.

The stubs are generated from ``schedulytics.proto`` when this module is
imported, so no generated code is checked in. grpc's proto importer only
searches ``sys.path``, so the directory holding the ``schedulytics``
package is put there first. Editable installs do not do that on their own.
"""

import sys
from pathlib import Path

import grpc

PROTO_FILE = "schedulytics/api/protos/schedulytics.proto"
PROTO_INCLUDE_ROOT = str(Path(__file__).resolve().parents[3])

if PROTO_INCLUDE_ROOT not in sys.path:
    sys.path.append(PROTO_INCLUDE_ROOT)

schedulytics_pb2, schedulytics_pb2_grpc = grpc.protos_and_services(PROTO_FILE)

JOB_SERVICE_NAME = schedulytics_pb2.DESCRIPTOR.services_by_name["JobService"].full_name
HELLO_SERVICE_NAME = schedulytics_pb2.DESCRIPTOR.services_by_name["HelloService"].full_name
