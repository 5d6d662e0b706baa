# shopii

A small terminal shop with two kinds of account: customers, who keep a list
of payment methods, and sellers, who keep a stock of products with
quantities.

## Running

```
pip install .
shopii
```

The main menu has three entries: LOGIN, REGISTER and QUIT. Press `w` and `s`
to move the highlight up and down, and the space bar to choose the entry
under it.

- **REGISTER** asks for a username and a password, then for an account type
  (`1` for customer, `2` for seller). Usernames and passwords must not be
  empty or contain spaces, and a username can be registered only once. When
  an entry is refused, the reason is shown and the form starts again.
- **LOGIN** asks for a username and a password; only the first word of each
  answer is used. After a failed attempt, press Escape to go back to the main
  menu, or any other key to try again.
- **QUIT** leaves the program. Ctrl-C or the end of input also ends it.

## Using the library

```python
from shopii.users import UserType, create_user

password = "password"
seller = create_user(UserType.SELLER, "alice", password)
seller.check_password(password)   # True
seller.user_type                  # UserType.SELLER
```

- `shopii.users` has `User`, `Customer`, `Seller`, the `UserType` enum and
  `create_user(user_type, username, password)`, which raises `ValueError` for
  an unknown account type. A `Customer` keeps payment methods with distinct
  names (`add_payment_method`, `remove_payment_method`, `payment_methods`).
  A `Seller` keeps products by name (`add_product`, `remove_product`,
  `quantity_of`, `products`); adding a product whose name is already stocked
  only raises its quantity.
- `shopii.payments` has the abstract `PaymentMethod`, with a `method_name`
  and an abstract `process_payment(amount)`.
- `shopii.products` has the abstract `Product`, with `name`, `description`,
  a whole-number `price` and an abstract `display()`.
- `shopii.app` has `ApplicationController`, which runs the menus. Its input
  and output functions (`read_line`, `read_key`, `write`, `clear`, `pause`)
  can be passed in, and its `register` and `authenticate` methods can be
  called without the interactive screens. A refused registration raises
  `RegistrationError`.

## What it does not do

- Logging in succeeds or fails and then returns to the main menu; there are
  no customer or seller screens after login.
- There are no concrete payment methods or products: `PaymentMethod` and
  `Product` must be subclassed before they can be used.
- Accounts live in memory only and are gone when the program exits.

## Tests

```
pip install .[test]
pytest
```