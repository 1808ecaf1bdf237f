import sys
import os

# Ensure flowpad is in path
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from flowpad import FALSE_HANDLE, TRUE_HANDLE, FlowchartEditor, Position


def main():
    print("Drawing flowchart...")
    with FlowchartEditor() as editor:
        start = editor.add_node("Start", Position(0, 0))
        order = editor.add_node("InputOutput", Position(0, 100))
        editor.relabel(order.id, "Read order")
        editor.connect(start.id, order.id, "a", "b")

        delivery = editor.add_node("Decision", Position(0, 200))
        editor.relabel(delivery.id, "Is it delivery?")
        editor.connect(order.id, delivery.id, "a", "a")

        address = editor.add_node("Process", Position(-150, 300))
        editor.relabel(address.id, "Enter Address")
        editor.connect(delivery.id, address.id, TRUE_HANDLE, "b")

        shop = editor.add_node("Process", Position(150, 300))
        editor.relabel(shop.id, "Go to shop")
        editor.connect(delivery.id, shop.id, FALSE_HANDLE, "b")

        end = editor.add_node("Stop", Position(0, 400))
        editor.relabel(end.id, "Enjoy Pizza")
        editor.connect(address.id, end.id, "a", "b")
        editor.connect(shop.id, end.id, "a", "b")

        snapshot = editor.store.snapshot()
        print(f"Flowchart has {len(snapshot.nodes)} nodes and {len(snapshot.edges)} edges.")
        for edge in snapshot.edges:
            if edge.label:
                print(f"  {edge.source} -> {edge.target}: {edge.label}")

        editor.save("pizza")
        print(f"Saved slots: {editor.list_slots()}")

        print("\nDeleting the decision removes its branches too...")
        editor.delete_node(delivery.id)
        print(f"Now {len(editor.store.edges)} edges remain.")

        editor.load("pizza")
        print(f"Reloaded 'pizza' with {len(editor.store.edges)} edges.")
        print(f"JSON written to {editor.export_json()}")


if __name__ == "__main__":
    main()
