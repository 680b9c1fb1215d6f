"""Category management: commands and handlers."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.category.category import Category
from storefront.category.events import CategoryRemoved
from storefront.domain import storefront
from storefront.shared.changes import supplied_changes


@storefront.command(part_of="Category")
class CreateCategory:
    title: String(required=True, max_length=255)
    description: Text()


@storefront.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    title: String(max_length=255)
    description: Text()
    fields_set: Text()  # JSON: list of supplied field names


@storefront.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        category = Category.create(title=command.title, description=command.description)
        current_domain.repository_for(Category).add(category)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        category.update_details(**supplied_changes(command, ("title", "description")))
        repo.add(category)
        return str(category.id)

    @handle(DeleteCategory)
    def delete_category(self, command):
        from storefront.shop_item.shop_item import ShopItem

        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        category_id = str(category.id)

        item_repo = current_domain.repository_for(ShopItem)
        unlinked = []
        for item in item_repo.in_category(category_id):
            item.unlink_category(category_id)
            item_repo.add(item)
            unlinked.append(str(item.id))

        category.raise_(CategoryRemoved(category_id=category_id, unlinked_items=",".join(unlinked)))
        repo.add(category)
        repo._dao.delete(category)
        return category_id
