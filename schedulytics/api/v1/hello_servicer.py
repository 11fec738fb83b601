"""gRPC adapter for the greeting service."""

from ...application.greeting_service import GreetingService
from .protos import schedulytics_pb2, schedulytics_pb2_grpc


class HelloServicer(schedulytics_pb2_grpc.HelloServiceServicer):

    def __init__(self, greeting_service: GreetingService):
        self.greeting_service = greeting_service

    def SayHello(self, request, context):
        return schedulytics_pb2.ResponseHello(
            response=self.greeting_service.say_hello()
        )
