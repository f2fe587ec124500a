from dataclasses import dataclass
from typing import Annotated

from ampy_dump import Mask, init, keep_last, masked_field, partial, serialize, shutdown

@dataclass
class Customer:
    name: str
    ssn: str = masked_field(keep_last(4))
    api_key: Annotated[str, Mask(partial())] = ""

def main():
    init(mode="compact")
    print(serialize(Customer("Ada", ssn="123-45-6789", api_key="sk-live-abcdef123456")))
    # {"api_key":"sk***56","name":"Ada","ssn":"***-**-6789"}
    shutdown()

if __name__ == "__main__":
    main()
