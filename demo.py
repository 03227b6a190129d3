#!/usr/bin/env python
from pokedex_sdk.client import PokedexClient


def main():
    c = PokedexClient(base_url="http://127.0.0.1:3000")

    # -----------------------------
    # Browse the catalog
    # -----------------------------
    print("Fetching catalog page (offset=0, limit=5)...")
    page = c.list_pokemons(offset=0, limit=5)
    for entry in page.get("results", []):
        print(" -", entry.get("name"))

    # -----------------------------
    # Build a collection
    # -----------------------------
    print("\nAdding pokemons...")
    pikachu = c.add_pokemon("Pikachu", "Electric")
    bulbasaur = c.add_pokemon("Bulbasaur", "Grass")
    print(pikachu)
    print(bulbasaur)

    # -----------------------------
    # Update
    # -----------------------------
    print("\nRenaming Bulbasaur's category...")
    print(c.update_pokemon(bulbasaur["id"], category="Grass/Poison"))

    # -----------------------------
    # Delete, then add again
    # -----------------------------
    print(f"\nDeleting pokemon {pikachu['id']}...")
    c.delete_pokemon(pikachu["id"])

    print("\nAdding Charmander (note the reused id)...")
    print(c.add_pokemon("Charmander", "Fire"))


if __name__ == "__main__":
    main()
