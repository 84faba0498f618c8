from argparse import ArgumentParser

from loguru import logger

from chatbot_server.client import ChatClient, Sender, greeting


parser = ArgumentParser("SimpleChatBot CLI Client")
parser.add_argument("--host", default="127.0.0.1:3000")

args = parser.parse_args()

PREFIXES = {Sender.BOT: "bot", Sender.ERROR: "error"}


def chat() -> None:
    print(f"bot> {greeting().text}")
    with ChatClient("http://" + args.host) as client:
        while True:
            try:
                text = input("you> ")
            except (EOFError, KeyboardInterrupt):
                logger.info("Bye!")
                return
            # the prompt already shows what the user typed
            for bubble in client.send(text)[1:]:
                print(f"{PREFIXES[bubble.sender]}> {bubble.text}")


chat()
