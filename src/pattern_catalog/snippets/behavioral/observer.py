"""Observer: notify a list of subscribers whenever something happens."""
from abc import ABC, abstractmethod
from typing import List


class Subscriber(ABC):
    @abstractmethod
    def update(self, headline: str) -> None:
        pass


class EmailSubscriber(Subscriber):
    def __init__(self, address: str):
        self.address = address

    def update(self, headline: str) -> None:
        print(f"Email to {self.address}: {headline}")


class SMSSubscriber(Subscriber):
    def __init__(self, number: str):
        self.number = number

    def update(self, headline: str) -> None:
        print(f"SMS to {self.number}: {headline}")


class NewsPublisher:
    def __init__(self):
        self._subscribers: List[Subscriber] = []

    def subscribe(self, subscriber: Subscriber) -> None:
        self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: Subscriber) -> None:
        self._subscribers.remove(subscriber)

    def publish(self, headline: str) -> None:
        # Subscribers are notified in the order they subscribed
        for subscriber in self._subscribers:
            subscriber.update(headline)


def demo() -> None:
    publisher = NewsPublisher()
    email = EmailSubscriber("ann@example.com")
    sms = SMSSubscriber("555-0100")
    publisher.subscribe(email)
    publisher.subscribe(sms)
    publisher.publish("Patterns book released")
    publisher.unsubscribe(email)
    publisher.publish("Second edition announced")
